# =============================================================================
# Form View Model
# =============================================================================
# Shared behaviour of the wizard's form steps (auto config, incoming,
# outgoing, options):
#
#   - Field edits go through reduce(), which a subclass implements with
#     InputField.update_value() on the matching field.
#   - ON_NEXT_CLICKED validates every field, folds the results into the
#     state, and emits NAVIGATE_NEXT only if all fields came back valid.
#   - ON_BACK_CLICKED emits NAVIGATE_BACK straight away.
# =============================================================================

import dataclasses
import logging
from enum import Enum, auto
from typing import Any, TypeVar

from mailsetup.core.input import InputField
from mailsetup.ui.viewmodel import BaseViewModel

logger = logging.getLogger(__name__)

S = TypeVar("S")


class FormAction(Enum):
    """Button events common to every form step."""
    ON_NEXT_CLICKED = auto()
    ON_BACK_CLICKED = auto()


class FormEffect(Enum):
    """One-shot navigation requested by a form step."""
    NAVIGATE_NEXT = auto()
    NAVIGATE_BACK = auto()


def input_fields(state: Any) -> list[InputField]:
    """Returns every InputField held by a state dataclass, in field order."""
    return [
        value
        for value in (getattr(state, f.name) for f in dataclasses.fields(state))
        if isinstance(value, InputField)
    ]


def is_form_valid(state: Any) -> bool:
    """True if every InputField of the state passed validation."""
    return all(field.is_valid for field in input_fields(state))


class FormViewModel(BaseViewModel[S, Any, FormEffect]):
    """
    Base class for form steps.

    Subclasses implement:
        reduce(state, event): apply a field-change event.
        validate(state): run every field's validator and fold the results.
    """

    def handle_event(self, event: Any) -> None:
        if event is FormAction.ON_NEXT_CLICKED:
            self._submit()
        elif event is FormAction.ON_BACK_CLICKED:
            self.emit_effect(FormEffect.NAVIGATE_BACK)
        else:
            self.update_state(lambda state: self.reduce(state, event))

    def reduce(self, state: S, event: Any) -> S:
        raise NotImplementedError

    def validate(self, state: S) -> S:
        raise NotImplementedError

    def _submit(self) -> None:
        state = self.update_state(self.validate)
        if is_form_valid(state):
            self.emit_effect(FormEffect.NAVIGATE_NEXT)
        else:
            logger.debug(f"{type(self).__name__}: form has invalid fields")
