"""INI-like configuration files with sections and multi-line values."""

from __future__ import annotations

import os
import re

DEFAULT_SECTION = "default"
DEFAULT_COMMENT = "#"
DEFAULT_COMMENT_SEM = ";"
DEFAULT_MULTI_LINE_SEPARATOR = "\\"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1
_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class ConfigError(ValueError):
    """Raised when configuration text or a value in it is malformed."""


class Config:
    """Section -> option -> value store parsed from INI-like text.

    Keys are looked up as ``"section::option"`` or just ``"option"`` for the
    default section.
    """

    def __init__(self) -> None:
        self._data: dict[str, dict[str, str]] = {}

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> "Config":
        """Parse the configuration file at ``path``."""
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
        return cls.from_text(text)

    @classmethod
    def from_text(cls, text: str) -> "Config":
        """Parse configuration from a string."""
        config = cls()
        config._parse(text)
        return config

    def add_config(self, section: str, option: str, value: str) -> bool:
        """Store a value; return True if the option did not exist before."""
        if not section:
            section = DEFAULT_SECTION
        options = self._data.setdefault(section, {})
        is_new = option not in options
        options[option] = value
        return is_new

    def _parse(self, text: str) -> None:
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()

        section = ""
        buffer = ""
        can_write = False
        line_num = 0

        for raw in lines:
            if can_write:
                buffer = self._write(section, line_num, buffer)
                can_write = False
            line_num += 1
            line = raw.strip()

            if not line or line.startswith(DEFAULT_COMMENT_SEM) or line.startswith(DEFAULT_COMMENT):
                can_write = True
                continue

            if line.startswith("[") and line.endswith("]"):
                if buffer:
                    buffer = self._write(section, line_num, buffer)
                    can_write = False
                section = line[1:-1]
                continue

            if line.endswith(DEFAULT_MULTI_LINE_SEPARATOR):
                piece = line[:-1].strip() + " "
            else:
                piece = line
                can_write = True

            cut = min(
                (i for i in (piece.find(DEFAULT_COMMENT), piece.find(DEFAULT_COMMENT_SEM)) if i >= 0),
                default=len(piece),
            )
            buffer += piece[:cut]

        if can_write:
            buffer = self._write(section, line_num, buffer)
        line_num += 1
        if buffer:
            self._write(section, line_num, buffer)

    def _write(self, section: str, line_num: int, buffer: str) -> str:
        """Store the buffered ``option = value`` and return the emptied buffer."""
        if not buffer:
            return buffer
        parts = buffer.split("=", 1)
        if len(parts) != 2:
            raise ConfigError(f"parse the content error : line {line_num} , {parts[0]} = ? ")
        self.add_config(section, parts[0].strip(), parts[1].strip())
        return ""

    @staticmethod
    def _split_key(key: str) -> tuple[str, str]:
        keys = key.lower().split("::")
        if len(keys) >= 2:
            return keys[0], keys[1]
        return "", keys[0]

    def _get(self, key: str) -> str:
        section, option = self._split_key(key)
        if not section:
            section = DEFAULT_SECTION
        return self._data.get(section, {}).get(option, "")

    def get_string(self, key: str) -> str:
        """Return the value for ``key``, or an empty string if it is absent."""
        return self._get(key)

    def get_strings(self, key: str) -> list[str]:
        """Return the value for ``key`` split on commas; empty list if absent."""
        value = self._get(key)
        if value == "":
            return []
        return value.split(",")

    def get_bool(self, key: str) -> bool:
        """Return the value for ``key`` as a boolean."""
        value = self._get(key)
        if value in _TRUE_WORDS:
            return True
        if value in _FALSE_WORDS:
            return False
        raise ConfigError(f"invalid boolean value {value!r} for key {key!r}")

    def get_int(self, key: str) -> int:
        """Return the value for ``key`` as a 64-bit signed integer."""
        value = self._get(key)
        if not _INT_RE.fullmatch(value):
            raise ConfigError(f"invalid integer value {value!r} for key {key!r}")
        number = int(value)
        if not _INT_MIN <= number <= _INT_MAX:
            raise ConfigError(f"integer value {value!r} for key {key!r} is out of range")
        return number

    def get_float(self, key: str) -> float:
        """Return the value for ``key`` as a float."""
        value = self._get(key)
        if not value or value != value.strip() or "_" in value:
            raise ConfigError(f"invalid float value {value!r} for key {key!r}")
        try:
            return float(value)
        except ValueError as exc:
            raise ConfigError(f"invalid float value {value!r} for key {key!r}") from exc

    def set(self, key: str, value: str) -> None:
        """Set ``key`` (``section::option`` or ``option``) to ``value``."""
        if not key:
            raise ConfigError("key is empty")
        section, option = self._split_key(key)
        self.add_config(section, option, value)