# =============================================================================
# Validation Vocabulary
# =============================================================================
# Shared types for field validation:
#   - ValidationError: marker base for every failure reason. Each validation
#     use case declares its own closed Enum of errors that mixes this in.
#   - ValidationResult: either Success (no payload) or Failure(error).
#   - ValidationUseCase: the one-method contract every validator follows.
#
# Validation failures are ordinary data. Nothing in here raises.
# =============================================================================

from dataclasses import dataclass
from typing import Protocol, TypeVar, runtime_checkable

T_contra = TypeVar("T_contra", contravariant=True)


class ValidationError:
    """
    Marker base class for validation failure reasons.

    Concrete errors are Enum members, so equality is by identity of the
    tag (the Enum class) and the variant (the member):

        >>> class ValidatePortError(ValidationError, Enum):
        ...     EMPTY_PORT = auto()
        ...     INVALID_PORT = auto()
    """


class ValidationResult:
    """Base class for the outcome of a validation use case."""

    __slots__ = ()

    @property
    def is_success(self) -> bool:
        """True if the validated input was accepted."""
        return isinstance(self, Success)


@dataclass(frozen=True)
class Success(ValidationResult):
    """The input was accepted."""

    def __repr__(self) -> str:
        return "Success"


@dataclass(frozen=True)
class Failure(ValidationResult):
    """
    The input was rejected.

    Attributes:
        error: Why the input was rejected.
    """
    error: ValidationError


# Success carries no payload, so a single shared instance is enough
SUCCESS = Success()


@runtime_checkable
class ValidationUseCase(Protocol[T_contra]):
    """
    A pure function from a raw field value to a ValidationResult.

    Implementations have no side effects and do no I/O.
    """

    def execute(self, input: T_contra) -> ValidationResult:
        ...
