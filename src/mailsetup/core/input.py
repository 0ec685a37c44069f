# =============================================================================
# Input Fields
# =============================================================================
# An InputField is the state of one user-editable form field: its current
# value, the reason it was last rejected (if any), and whether it passed
# validation.
#
# Fields are immutable. Every operation returns a new instance, so screen
# state can be published as snapshots without defensive copies.
#
# Lifecycle of a field:
#   1. Created empty, with no error and is_valid=False
#   2. User edits -> update_value() (always drops any previous verdict)
#   3. Validation runs -> update_from_validation_result()
# =============================================================================

from dataclasses import dataclass, replace
from typing import Generic, TypeVar

from mailsetup.core.validation import Failure, ValidationError, ValidationResult

T = TypeVar("T")


@dataclass(frozen=True)
class InputField(Generic[T]):
    """
    Value, error and validity of a single form field.

    Attributes:
        value: The raw value the user entered.
        error: The reason validation failed, or None.
        is_valid: Whether the current value passed validation.
                  Whenever this is True, error is None.

    The constructor does not reconcile contradictory arguments; callers
    must not pass is_valid=True together with an error. All the update
    operations keep the invariant.
    """
    value: T
    error: ValidationError | None = None
    is_valid: bool = False

    def update_value(self, value: T) -> "InputField[T]":
        """
        Replace the value.

        Any edit invalidates the previous verdict, so the error is cleared
        and the field goes back to not-valid until it is validated again.
        This happens even when the new value equals the old one.
        """
        return replace(self, value=value, error=None, is_valid=False)

    def update_error(self, error: ValidationError) -> "InputField[T]":
        """Record a validation failure. The value is kept."""
        return replace(self, error=error, is_valid=False)

    def update_validity(self, is_valid: bool) -> "InputField[T]":
        """
        Set the validity flag.

        Marking a field valid clears its error. Marking it invalid keeps
        whatever error was recorded before.
        """
        if is_valid:
            return replace(self, error=None, is_valid=True)
        return replace(self, is_valid=False)

    def update_from_validation_result(self, result: ValidationResult) -> "InputField[T]":
        """Fold the outcome of a validation use case into the field."""
        if isinstance(result, Failure):
            return self.update_error(result.error)
        return self.update_validity(True)


@dataclass(frozen=True)
class StringInputField(InputField[str]):
    """A text field. Starts out empty."""
    value: str = ""


@dataclass(frozen=True)
class NumberInputField(InputField[int | None]):
    """An optional whole-number field (e.g. a port). Starts out as None."""
    value: int | None = None
