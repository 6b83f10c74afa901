import pytest
from pydantic import ValidationError
from nullable.core.types import NOTHING, Nothing, Some, from_optional, to_optional


def test_some_holds_value_as_is():
    payload = {"key": [1, 2]}
    some = Some(payload)
    assert some.value is payload
    assert Some(str.upper).value is str.upper


def test_structural_equality():
    assert Some(1) == Some(1)
    assert Some(1) != Some(2)
    assert Nothing() == NOTHING
    assert Some(None) != NOTHING
    assert Some(1) != 1


def test_values_are_hashable():
    assert len({Some(1), Some(1), NOTHING, Nothing()}) == 2


def test_values_are_frozen():
    some = Some(1)
    with pytest.raises(ValidationError):
        some.value = 2


def test_repr():
    assert repr(Some(3)) == "Some(3)"
    assert repr(Some("a")) == "Some('a')"
    assert repr(NOTHING) == "Nothing"
    assert str(Some(3)) == "Some(3)"


def test_pattern_matching():
    def describe(nullable):
        match nullable:
            case Some(value):
                return f"some {value}"
            case Nothing():
                return "nothing"

    assert describe(Some(5)) == "some 5"
    assert describe(NOTHING) == "nothing"


def test_from_optional():
    assert from_optional(None) == NOTHING
    assert from_optional(0) == Some(0)
    assert from_optional("") == Some("")


def test_to_optional():
    assert to_optional(Some(5)) == 5
    assert to_optional(NOTHING) is None


def test_to_optional_rejects_plain_values():
    with pytest.raises(TypeError):
        to_optional(5)
