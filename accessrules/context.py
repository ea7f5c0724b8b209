"""Selection of the request, policy, effect and matcher definitions to enforce with."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass
class EnforceContext:
    """Names the definitions an enforcement uses.

    Passed as the first request value to switch from the default ``r``,
    ``p``, ``e`` and ``m`` definitions to other ones.
    """

    r_type: str = "r"
    p_type: str = "p"
    e_type: str = "e"
    m_type: str = "m"

    def cache_key(self) -> str:
        """Return the key this context contributes to a decision-cache key."""
        return f"EnforceContext{{{self.r_type}-{self.p_type}-{self.e_type}-{self.m_type}}}"


def new_enforce_context(suffix: str) -> EnforceContext:
    """Build a context whose definition names all carry ``suffix``."""
    return EnforceContext(
        r_type="r" + suffix,
        p_type="p" + suffix,
        e_type="e" + suffix,
        m_type="m" + suffix,
    )


def split_enforce_context(rvals: Sequence[Any]) -> tuple[EnforceContext, list[Any]]:
    """Separate a leading context from the request values.

    When the first value is an :class:`EnforceContext` it is returned with the
    remaining values; otherwise the default context is returned with all values.
    """
    values = list(rvals)
    if values and isinstance(values[0], EnforceContext):
        return values[0], values[1:]
    return EnforceContext(), values