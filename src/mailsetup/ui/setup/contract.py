# =============================================================================
# Account Setup Wizard Contract
# =============================================================================
# The wizard walks through four steps in a fixed order:
#
#   AUTO_CONFIG -> INCOMING_CONFIG -> OUTGOING_CONFIG -> OPTIONS
#
# No branching, no skipping. Going "next" past OPTIONS or "back" before
# AUTO_CONFIG leaves the wizard, which the view model signals with an Effect
# instead of a state change.
# =============================================================================

from dataclasses import dataclass
from enum import Enum, auto


class SetupStep(Enum):
    """Steps of the setup wizard, in order."""
    AUTO_CONFIG = auto()        # Email address + password
    INCOMING_CONFIG = auto()    # IMAP server
    OUTGOING_CONFIG = auto()    # SMTP server
    OPTIONS = auto()            # Account name, display name, signature

    @classmethod
    def first(cls) -> "SetupStep":
        return next(iter(cls))

    @classmethod
    def last(cls) -> "SetupStep":
        return list(cls)[-1]

    @property
    def next_step(self) -> "SetupStep | None":
        """The following step, or None if this is the last one."""
        steps = list(SetupStep)
        index = steps.index(self)
        return steps[index + 1] if index + 1 < len(steps) else None

    @property
    def previous_step(self) -> "SetupStep | None":
        """The preceding step, or None if this is the first one."""
        steps = list(SetupStep)
        index = steps.index(self)
        return steps[index - 1] if index > 0 else None


@dataclass(frozen=True)
class State:
    """
    Wizard state.

    Attributes:
        setup_step: The step currently shown.
    """
    setup_step: SetupStep = SetupStep.AUTO_CONFIG


class Event(Enum):
    ON_NEXT = auto()
    ON_BACK = auto()


class Effect(Enum):
    """One-shot navigation out of the wizard."""
    NAVIGATE_NEXT = auto()      # Finished the last step
    NAVIGATE_BACK = auto()      # Backed out of the first step
