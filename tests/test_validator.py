"""
Tests for the person validator.
"""

import pytest

from people_api.entities import PersonEntity
from people_api.exceptions import PersonValidationError
from people_api.validation import ConstraintViolation, PersonValidator


@pytest.fixture
def validator():
    return PersonValidator()


def test_valid_name(validator):
    assert validator.validate(PersonEntity(id=None, name="Name")) == []


@pytest.mark.parametrize("name", ["N", "x" * 30, "  padded  "])
def test_boundary_names_are_valid(validator, name):
    assert validator.validate(PersonEntity(id=None, name=name)) == []


def test_null_name(validator):
    assert validator.validate(PersonEntity(id=None, name=None)) == [
        ConstraintViolation("name", "must not be blank"),
        ConstraintViolation("name", "must not be null"),
    ]


def test_empty_name(validator):
    assert validator.validate(PersonEntity(id=None, name="")) == [
        ConstraintViolation("name", "must not be blank"),
        ConstraintViolation("name", "size must be between 1 and 30"),
    ]


def test_whitespace_name_is_blank(validator):
    assert validator.validate(PersonEntity(id=None, name="   ")) == [
        ConstraintViolation("name", "must not be blank"),
    ]


def test_name_too_long(validator):
    assert validator.validate(PersonEntity(id=None, name="x" * 31)) == [
        ConstraintViolation("name", "size must be between 1 and 30"),
    ]


def test_id_is_not_checked(validator):
    assert validator.validate(PersonEntity(id=-5, name="Name")) == []


def test_check_returns_valid_person(validator):
    person = PersonEntity(id=1, name="Name")
    assert validator.check(person) is person


def test_check_raises_with_every_violation(validator):
    with pytest.raises(PersonValidationError) as exc_info:
        validator.check(PersonEntity(id=None, name=""))

    error = exc_info.value
    assert error.errors == [
        "Name - must not be blank",
        "Name - size must be between 1 and 30",
    ]
    assert error.message == "Name - must not be blank\nName - size must be between 1 and 30"
    assert str(error) == error.message


def test_violation_format_capitalizes_field():
    assert ConstraintViolation("name", "must not be null").format() == "Name - must not be null"


def test_custom_length_bounds():
    validator = PersonValidator(name_min_length=2, name_max_length=4)
    assert validator.validate(PersonEntity(id=None, name="ab")) == []
    assert validator.validate(PersonEntity(id=None, name="abcde")) == [
        ConstraintViolation("name", "size must be between 2 and 4"),
    ]


def test_invalid_length_bounds():
    with pytest.raises(ValueError):
        PersonValidator(name_min_length=5, name_max_length=1)
