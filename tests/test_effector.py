import pytest

from accessrules.effector import (
    ALLOW_AND_DENY_EFFECT,
    ALLOW_OVERRIDE_EFFECT,
    DENY_OVERRIDE_EFFECT,
    PRIORITY_EFFECT,
    SUBJECT_PRIORITY_EFFECT,
    DefaultEffector,
    Effect,
    Effector,
    UnsupportedEffectError,
)

A, I, D = Effect.ALLOW, Effect.INDETERMINATE, Effect.DENY


@pytest.fixture
def eft():
    return DefaultEffector()


def test_allow_override_matched_allow(eft):
    assert eft.merge_effects(ALLOW_OVERRIDE_EFFECT, [D, A], [1, 1], 1, 2) == (A, 1)


def test_allow_override_not_matched(eft):
    assert eft.merge_effects(ALLOW_OVERRIDE_EFFECT, [A], [0], 0, 1) == (I, -1)


def test_allow_override_matched_deny_is_indeterminate(eft):
    assert eft.merge_effects(ALLOW_OVERRIDE_EFFECT, [D], [1], 0, 1) == (I, -1)


def test_deny_override_matched_deny(eft):
    assert eft.merge_effects(DENY_OVERRIDE_EFFECT, [D, A], [1, 1], 0, 2) == (D, 0)


def test_deny_override_allows_at_last_rule(eft):
    assert eft.merge_effects(DENY_OVERRIDE_EFFECT, [A, A], [1, 1], 1, 2) == (A, -1)


def test_deny_override_waits_before_last_rule(eft):
    assert eft.merge_effects(DENY_OVERRIDE_EFFECT, [A, A], [1, 1], 0, 2) == (I, -1)


def test_allow_and_deny_short_circuits_on_deny(eft):
    assert eft.merge_effects(ALLOW_AND_DENY_EFFECT, [A, D, A], [1, 1, 1], 1, 3) == (D, 1)


def test_allow_and_deny_middle_is_indeterminate(eft):
    assert eft.merge_effects(ALLOW_AND_DENY_EFFECT, [A, A, A], [1, 1, 1], 0, 3) == (I, -1)


def test_allow_and_deny_picks_first_matched_allow(eft):
    result = eft.merge_effects(ALLOW_AND_DENY_EFFECT, [A, A, I], [0, 1, 1], 2, 3)
    assert result == (A, 1)


def test_allow_and_deny_without_allow(eft):
    assert eft.merge_effects(ALLOW_AND_DENY_EFFECT, [I, A], [1, 0], 1, 2) == (I, -1)


@pytest.mark.parametrize("expr", [PRIORITY_EFFECT, SUBJECT_PRIORITY_EFFECT])
def test_priority_takes_last_decided_match(eft, expr):
    effects = [A, D, I]
    matches = [1, 1, 1]
    assert eft.merge_effects(expr, effects, matches, 2, 3) == (D, 1)


@pytest.mark.parametrize("expr", [PRIORITY_EFFECT, SUBJECT_PRIORITY_EFFECT])
def test_priority_skips_unmatched(eft, expr):
    assert eft.merge_effects(expr, [A, D], [1, 0], 1, 2) == (A, 0)


def test_priority_all_indeterminate(eft):
    assert eft.merge_effects(PRIORITY_EFFECT, [I, I], [1, 1], 1, 2) == (I, -1)


def test_unsupported_effect_raises(eft):
    with pytest.raises(UnsupportedEffectError, match="unsupported effect"):
        eft.merge_effects("some(where (p_eft == maybe))", [A], [1], 0, 1)


def test_effector_is_abstract():
    with pytest.raises(TypeError):
        Effector()


def test_float_matches_are_honoured(eft):
    result = eft.merge_effects(ALLOW_OVERRIDE_EFFECT, [A, A], [0.0, 1.0], 1, 2)
    assert result == (A, 1)