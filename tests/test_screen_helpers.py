# =============================================================================
# Setup Screen Helper Tests
# =============================================================================
# The screen itself needs a running Textual app; these cover the pure
# helpers it renders and finishes with.
# =============================================================================

from conftest import Recorder, SampleError
from mailsetup.app import create_components
from mailsetup.config import Config
from mailsetup.core import NumberInputField, StringInputField
from mailsetup.ui import autoconfig, options, serverconfig
from mailsetup.ui.form import FormAction
from mailsetup.ui.screens.setup import (
    ERROR_MESSAGES,
    complete_setup,
    error_message,
    first_incomplete_step,
    parse_port,
)
from mailsetup.ui.setup import Effect, Event, SetupStep
from mailsetup.usecase import ValidatePortError


def test_parse_port():
    assert parse_port("993") == 993
    assert parse_port(" 25 ") == 25
    assert parse_port("") is None
    assert parse_port("-") is None


def test_error_message_for_valid_field_is_empty():
    assert error_message(StringInputField(value="x", is_valid=True)) == ""


def test_error_message_for_known_error():
    field = NumberInputField().update_error(ValidatePortError.INVALID_PORT)

    assert error_message(field) == ERROR_MESSAGES[ValidatePortError.INVALID_PORT]


def test_error_message_for_unknown_error():
    field = StringInputField().update_error(SampleError.FIRST)

    assert error_message(field) == "Invalid value."


# -----------------------------------------------------------------------------
# Finishing the wizard
# -----------------------------------------------------------------------------

def components_at(step):
    config = Config()
    config.wizard.initial_step = step
    return create_components(config)


def forms_of(components):
    return {
        SetupStep.AUTO_CONFIG: components.auto_config_view_model,
        SetupStep.INCOMING_CONFIG: components.incoming_view_model,
        SetupStep.OUTGOING_CONFIG: components.outgoing_view_model,
        SetupStep.OPTIONS: components.options_view_model,
    }


def fill_all(components):
    auto_config = components.auto_config_view_model
    auto_config.event(autoconfig.EmailAddressChanged("jane@example.com"))
    auto_config.event(autoconfig.PasswordChanged("secret"))

    for view_model in (components.incoming_view_model, components.outgoing_view_model):
        view_model.event(serverconfig.ServerChanged("mail.example.com"))
        view_model.event(serverconfig.UsernameChanged("jane"))
        view_model.event(serverconfig.PasswordChanged("secret"))

    components.options_view_model.event(options.DisplayNameChanged("Jane Doe"))

    for view_model in forms_of(components).values():
        view_model.event(FormAction.ON_NEXT_CLICKED)


def test_first_incomplete_step_in_wizard_order():
    components = components_at(SetupStep.AUTO_CONFIG)
    forms = forms_of(components)
    assert first_incomplete_step(forms) is SetupStep.AUTO_CONFIG

    fill_all(components)
    assert first_incomplete_step(forms) is None

    components.outgoing_view_model.event(serverconfig.ServerChanged("smtp.example.com"))
    assert first_incomplete_step(forms) is SetupStep.OUTGOING_CONFIG


def test_skipped_steps_block_the_draft():
    components = components_at(SetupStep.OPTIONS)
    wizard = components.setup_view_model
    forms = forms_of(components)
    components.options_view_model.event(options.DisplayNameChanged("Jane Doe"))
    components.options_view_model.event(FormAction.ON_NEXT_CLICKED)

    drafts, effects = [], Recorder()

    def on_effect(effect):
        effects(effect)
        if effect is Effect.NAVIGATE_NEXT:
            drafts.append(complete_setup(wizard, forms))

    wizard.effect.subscribe(on_effect)
    wizard.event(Event.ON_NEXT)

    assert drafts == [None]
    assert wizard.current_state.setup_step is SetupStep.AUTO_CONFIG
    assert effects.items == [Effect.NAVIGATE_NEXT]


def test_complete_forms_give_a_draft():
    components = components_at(SetupStep.OPTIONS)
    fill_all(components)

    draft = complete_setup(components.setup_view_model, forms_of(components))

    assert draft is not None
    assert draft.email == "jane@example.com"
    assert draft.imap_host == "mail.example.com"
    assert draft.display_name == "Jane Doe"
    assert components.setup_view_model.current_state.setup_step is SetupStep.OPTIONS
