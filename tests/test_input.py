# =============================================================================
# InputField Tests
# =============================================================================
# Every test runs once for the text field and once for the number field;
# both variants must behave identically.
# =============================================================================

import pytest

from conftest import SampleError
from mailsetup.core import SUCCESS, Failure, NumberInputField, StringInputField

FIELD_CASES = [
    pytest.param(StringInputField, "input", "", "new value", id="StringInputField"),
    pytest.param(NumberInputField, 123, None, 456, id="NumberInputField"),
]


@pytest.mark.parametrize("field_cls, value, empty_value, updated_value", FIELD_CASES)
class TestInputField:

    def test_default_values(self, field_cls, value, empty_value, updated_value):
        field = field_cls()

        assert field.value == empty_value
        assert field.error is None
        assert field.is_valid is False

    def test_update_value_resets_error_and_validity(
        self, field_cls, value, empty_value, updated_value
    ):
        field = field_cls(value=value, error=SampleError.FIRST, is_valid=True)

        result = field.update_value(updated_value)

        assert result.value == updated_value
        assert result.error is None
        assert result.is_valid is False

    def test_update_value_resets_even_for_same_value(
        self, field_cls, value, empty_value, updated_value
    ):
        field = field_cls(value=value, is_valid=True)

        result = field.update_value(value)

        assert result.value == value
        assert result.is_valid is False

    def test_update_error_resets_validity(self, field_cls, value, empty_value, updated_value):
        field = field_cls(value=value, error=None, is_valid=True)

        result = field.update_error(SampleError.FIRST)

        assert result.value == value
        assert result.error is SampleError.FIRST
        assert result.is_valid is False

    def test_update_error_replaces_error(self, field_cls, value, empty_value, updated_value):
        field = field_cls(value=value, error=SampleError.FIRST)

        result = field.update_error(SampleError.SECOND)

        assert result.value == value
        assert result.error is SampleError.SECOND
        assert result.is_valid is False

    def test_valid_clears_error(self, field_cls, value, empty_value, updated_value):
        field = field_cls(value=value, error=SampleError.FIRST, is_valid=False)

        result = field.update_validity(True)

        assert result.value == value
        assert result.error is None
        assert result.is_valid is True

    def test_invalid_keeps_error(self, field_cls, value, empty_value, updated_value):
        field = field_cls(value=value, error=SampleError.FIRST, is_valid=False)

        result = field.update_validity(False)

        assert result.value == value
        assert result.error is SampleError.FIRST
        assert result.is_valid is False

    def test_from_success_result(self, field_cls, value, empty_value, updated_value):
        field = field_cls(value=value, error=SampleError.FIRST)

        result = field.update_from_validation_result(SUCCESS)

        assert result == field.update_validity(True)
        assert result.error is None
        assert result.is_valid is True

    def test_from_failure_result(self, field_cls, value, empty_value, updated_value):
        field = field_cls(value=value, is_valid=True)

        result = field.update_from_validation_result(Failure(SampleError.FIRST))

        assert result == field.update_error(SampleError.FIRST)
        assert result.value == value
        assert result.error is SampleError.FIRST
        assert result.is_valid is False

    def test_operations_return_new_instances(
        self, field_cls, value, empty_value, updated_value
    ):
        field = field_cls(value=value)

        field.update_value(updated_value)
        field.update_error(SampleError.FIRST)
        field.update_validity(True)

        assert field == field_cls(value=value)

    def test_operations_keep_the_variant(self, field_cls, value, empty_value, updated_value):
        field = field_cls(value=value)

        assert type(field.update_value(updated_value)) is field_cls
        assert type(field.update_from_validation_result(SUCCESS)) is field_cls


def test_valid_implies_no_error_after_any_sequence():
    field = StringInputField()
    steps = [
        lambda f: f.update_error(SampleError.FIRST),
        lambda f: f.update_validity(True),
        lambda f: f.update_validity(False),
        lambda f: f.update_from_validation_result(Failure(SampleError.SECOND)),
        lambda f: f.update_from_validation_result(SUCCESS),
        lambda f: f.update_value("x"),
        lambda f: f.update_validity(True),
    ]

    for step in steps:
        field = step(field)
        if field.is_valid:
            assert field.error is None
