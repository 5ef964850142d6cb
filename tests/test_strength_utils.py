import pytest

from core.strength_utils import StrengthAssessment, assess_strength, has_sequential_run, label_for


def test_repeated_characters_lower_the_score():
    repeated = assess_strength("aaaAAA111!!!")
    mixed = assess_strength("aAa1!A1a!A1!")
    assert "Avoid repeated characters" in repeated.suggestions
    assert repeated.score == 6
    assert mixed.score == 7
    assert repeated.score < mixed.score


def test_full_marks():
    a = assess_strength("Xq7!mZ2@vR9#")
    assert a == StrengthAssessment(7, "Very Strong", ())


def test_missing_special_only():
    a = assess_strength("Password1")
    assert a.score == 4
    assert a.label == "Strong"
    assert a.suggestions == ("Add special characters",)


def test_short_sequential():
    a = assess_strength("abc")
    assert a.score == 0
    assert a.label == "Weak"
    assert "Avoid sequential characters" in a.suggestions
    assert a.suggestions[0].startswith("Increase length")


def test_numeric_run():
    a = assess_strength("x1234567")
    assert a.score == 2
    assert a.label == "Medium"
    assert "Avoid sequential characters" in a.suggestions


def test_empty_password():
    a = assess_strength("")
    assert a.score == 0
    assert a.label == "Weak"
    assert len(a.suggestions) == 5


@pytest.mark.parametrize("pw,expected", [
    ("q890w", True),
    ("zzabczz", True),
    ("zzABCzz", False),
    ("xdefx", True),
    ("321", False),
    ("efg", False),
    ("901", False),
])
def test_sequential_runs(pw, expected):
    assert has_sequential_run(pw) is expected


def test_custom_special_set():
    assert "Add special characters" in assess_strength("Abcdefgh1~", special_chars="!@").suggestions
    assert "Add special characters" not in assess_strength("Abcdefgh1~", special_chars="~").suggestions


def test_is_pure():
    pw = "Tr0ub4dor&3"
    assert assess_strength(pw) == assess_strength(pw)
    assert pw == "Tr0ub4dor&3"


@pytest.mark.parametrize("score,label", [
    (7, "Very Strong"), (6, "Very Strong"), (5, "Strong"), (4, "Strong"),
    (3, "Medium"), (2, "Medium"), (1, "Weak"), (0, "Weak"), (-2, "Weak"),
])
def test_label_for(score, label):
    assert label_for(score) == label


def test_uppercase_letter_run_is_not_penalised():
    a = assess_strength("XyABCz9!mQ2#")
    assert a.score == 7
    assert "Avoid sequential characters" not in a.suggestions
