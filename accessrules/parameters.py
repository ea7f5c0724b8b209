"""Request and policy values as seen by a matcher expression."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .effector import Effect


class ParameterNotFoundError(LookupError):
    """Raised when a matcher refers to a request or policy field that does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No parameter '{name}' found.")
        self.name = name


class MatcherResultError(TypeError):
    """Raised when a matcher evaluates to something other than a bool or a number."""


@dataclass
class EnforceParameters:
    """Resolves ``r_*`` and ``p_*`` names to the current request and policy values.

    Bounds are assumed to have been checked: every token index is valid for the
    matching value sequence.
    """

    r_tokens: Mapping[str, int]
    r_vals: Sequence[Any]
    p_tokens: Mapping[str, int]
    p_vals: Sequence[str] = field(default_factory=list)

    def get(self, name: str) -> Any:
        """Return the value bound to ``name``; an empty name yields None."""
        if not name:
            return None
        if name[0] == "p":
            tokens, values = self.p_tokens, self.p_vals
        elif name[0] == "r":
            tokens, values = self.r_tokens, self.r_vals
        else:
            raise ParameterNotFoundError(name)
        try:
            index = tokens[name]
        except KeyError:
            raise ParameterNotFoundError(name) from None
        return values[index]


def index_tokens(tokens: Iterable[str]) -> dict[str, int]:
    """Map each token to its position; a repeated token keeps its last position."""
    return {token: index for index, token in enumerate(tokens)}


def match_result(value: Any) -> float:
    """Turn a matcher's result into 1.0 for a match or 0.0 for no match."""
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return 1.0 if value != 0 else 0.0
    raise MatcherResultError("matcher result should be bool, int or float")


def effect_of(eft: str | None) -> Effect:
    """Return the effect a policy rule declares in its ``eft`` field.

    ``None`` stands for a policy without an ``eft`` field, which allows.
    """
    if eft is None or eft == "allow":
        return Effect.ALLOW
    if eft == "deny":
        return Effect.DENY
    return Effect.INDETERMINATE