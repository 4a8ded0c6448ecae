import pytest

from degree_audit.data.codes import has_prefix, normalize_code, year_digit


@pytest.mark.parametrize("raw, expected", [
    ("MAT313β", "mat313b"),
    ("csc 113α", "csc113a"),
    ("MAT113δ", "mat113d"),
    ("FSC2ε1", "fsc2e1"),
    ("  ENG1b10 ", "eng1b10"),
    ("", ""),
])
def test_normalize_code(raw, expected):
    assert normalize_code(raw) == expected


@pytest.mark.parametrize("raw", ["MAT313β", "Csc 113α", "eng1b10", "BOT3112"])
def test_normalize_code_is_idempotent(raw):
    once = normalize_code(raw)
    assert normalize_code(once) == once


def test_greek_and_latin_forms_collide():
    assert normalize_code("MAT225β") == normalize_code("mat225b")


def test_year_digit():
    assert year_digit("ENG1b10") == "1"
    assert year_digit("MAT4b6β") == "4"
    assert year_digit("CLC") is None
    assert year_digit("") is None


def test_has_prefix_ignores_case():
    assert has_prefix("csc1113", ("CSC", "COM"))
    assert has_prefix("COM2113", ("CSC", "COM"))
    assert not has_prefix("MAT111β", ("CSC", "COM"))
    assert not has_prefix(None, ("CSC",))
