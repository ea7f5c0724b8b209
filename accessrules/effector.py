"""Policy effects and the rules for merging them into one decision."""

from __future__ import annotations

import abc
import enum
from collections.abc import Sequence

DOMAIN_INDEX = "dom"
SUBJECT_INDEX = "sub"
OBJECT_INDEX = "obj"
PRIORITY_INDEX = "priority"

ALLOW_OVERRIDE_EFFECT = "some(where (p_eft == allow))"
DENY_OVERRIDE_EFFECT = "!some(where (p_eft == deny))"
ALLOW_AND_DENY_EFFECT = "some(where (p_eft == allow)) && !some(where (p_eft == deny))"
PRIORITY_EFFECT = "priority(p_eft) || deny"
SUBJECT_PRIORITY_EFFECT = "subjectPriority(p_eft) || deny"


class Effect(enum.IntEnum):
    """The result for a policy rule."""

    ALLOW = 0
    INDETERMINATE = 1
    DENY = 2


class UnsupportedEffectError(ValueError):
    """Raised when a policy effect expression is not recognised."""


class Effector(abc.ABC):
    """Merges per-rule matching results into a single decision."""

    @abc.abstractmethod
    def merge_effects(
        self,
        expr: str,
        effects: Sequence[Effect],
        matches: Sequence[float],
        policy_index: int,
        policy_length: int,
    ) -> tuple[Effect, int]:
        """Return the merged effect and the index of the deciding rule (-1 if none)."""


class DefaultEffector(Effector):
    """Effector supporting the standard effect expressions."""

    def merge_effects(
        self,
        expr: str,
        effects: Sequence[Effect],
        matches: Sequence[float],
        policy_index: int,
        policy_length: int,
    ) -> tuple[Effect, int]:
        matched = matches[policy_index] != 0
        current = effects[policy_index]
        is_last = policy_index == policy_length - 1

        if expr == ALLOW_OVERRIDE_EFFECT:
            if matched and current == Effect.ALLOW:
                return Effect.ALLOW, policy_index
            return Effect.INDETERMINATE, -1

        if expr == DENY_OVERRIDE_EFFECT:
            if matched and current == Effect.DENY:
                return Effect.DENY, policy_index
            if is_last:
                return Effect.ALLOW, -1
            return Effect.INDETERMINATE, -1

        if expr == ALLOW_AND_DENY_EFFECT:
            if matched and current == Effect.DENY:
                return Effect.DENY, policy_index
            if policy_index < policy_length - 1:
                return Effect.INDETERMINATE, -1
            for index, (effect, match) in enumerate(zip(effects, matches)):
                if match != 0 and effect == Effect.ALLOW:
                    return Effect.ALLOW, index
            return Effect.INDETERMINATE, -1

        if expr in (PRIORITY_EFFECT, SUBJECT_PRIORITY_EFFECT):
            for index in reversed(range(len(effects))):
                if matches[index] == 0:
                    continue
                effect = effects[index]
                if effect != Effect.INDETERMINATE:
                    return (Effect.ALLOW if effect == Effect.ALLOW else Effect.DENY), index
            return Effect.INDETERMINATE, -1

        raise UnsupportedEffectError("unsupported effect")