# =============================================================================
# Account Setup Screen
# =============================================================================
# Renders the setup wizard. The screen owns no logic of its own: it forwards
# widget events to the view models and redraws whatever state they publish.
#
# Wiring:
#   - Input/Select changes  -> field events on the current step's view model
#   - Next/Back buttons     -> ON_NEXT_CLICKED / ON_BACK_CLICKED on that step
#   - step NAVIGATE_NEXT    -> wizard ON_NEXT
#   - step NAVIGATE_BACK    -> wizard ON_BACK
#   - wizard NAVIGATE_NEXT  -> dismiss with the finished AccountDraft, or
#                              rewind to the first step left unfilled
#   - wizard NAVIGATE_BACK  -> dismiss with None (user backed out)
# =============================================================================

import logging
from collections.abc import Mapping

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, ContentSwitcher, Footer, Input, Select, Static

from mailsetup.contacts import ContactPhotoLoader
from mailsetup.core import AccountDraft, ConnectionSecurity, InputField, ValidationError
from mailsetup.rendering import render_avatar
from mailsetup.ui import autoconfig, options, serverconfig
from mailsetup.ui.autoconfig import AccountAutoConfigViewModel
from mailsetup.ui.form import FormAction, FormEffect, FormViewModel, is_form_valid
from mailsetup.ui.incoming import AccountIncomingConfigViewModel
from mailsetup.ui.options import AccountOptionsViewModel
from mailsetup.ui.outgoing import AccountOutgoingConfigViewModel
from mailsetup.ui.setup import AccountSetupViewModel, Effect, Event, SetupStep
from mailsetup.usecase import (
    ValidateAccountNameError,
    ValidateDisplayNameError,
    ValidateEmailAddressError,
    ValidateEmailSignatureError,
    ValidatePasswordError,
    ValidatePortError,
    ValidateServerError,
    ValidateUsernameError,
)

logger = logging.getLogger(__name__)


# What the user reads for each validation error
ERROR_MESSAGES: dict[ValidationError, str] = {
    ValidateEmailAddressError.EMPTY_EMAIL_ADDRESS: "Email address is required.",
    ValidateEmailAddressError.INVALID_EMAIL_ADDRESS: "This doesn't look like an email address.",
    ValidatePasswordError.EMPTY_PASSWORD: "Password is required.",
    ValidateServerError.EMPTY_SERVER: "Server is required.",
    ValidatePortError.EMPTY_PORT: "Port is required.",
    ValidatePortError.INVALID_PORT: "Port must be between 0 and 65535.",
    ValidateUsernameError.EMPTY_USERNAME: "Username is required.",
    ValidateAccountNameError.BLANK_ACCOUNT_NAME: "Account name can't be only spaces.",
    ValidateDisplayNameError.EMPTY_DISPLAY_NAME: "Display name is required.",
    ValidateEmailSignatureError.BLANK_EMAIL_SIGNATURE: "Signature can't be only spaces.",
}

STEP_TITLES = {
    SetupStep.AUTO_CONFIG: "1/4  Your email account",
    SetupStep.INCOMING_CONFIG: "2/4  Incoming server (IMAP)",
    SetupStep.OUTGOING_CONFIG: "3/4  Outgoing server (SMTP)",
    SetupStep.OPTIONS: "4/4  Account options",
}

# ContentSwitcher panel id per step
STEP_PANELS = {
    SetupStep.AUTO_CONFIG: "panel-auto-config",
    SetupStep.INCOMING_CONFIG: "panel-incoming",
    SetupStep.OUTGOING_CONFIG: "panel-outgoing",
    SetupStep.OPTIONS: "panel-options",
}

SECURITY_OPTIONS = [
    ("TLS", ConnectionSecurity.TLS),
    ("STARTTLS", ConnectionSecurity.STARTTLS),
    ("None", ConnectionSecurity.NONE),
]


def error_message(field: InputField) -> str:
    """Text for a field's error label (empty when there's nothing to show)."""
    if field.error is None:
        return ""
    return ERROR_MESSAGES.get(field.error, "Invalid value.")


def parse_port(text: str) -> int | None:
    """Port input text -> number, or None if empty or not a number."""
    try:
        return int(text.strip())
    except ValueError:
        return None


def first_incomplete_step(forms: Mapping[SetupStep, FormViewModel]) -> SetupStep | None:
    """The earliest step whose form hasn't passed validation, or None."""
    for step in SetupStep:
        if not is_form_valid(forms[step].current_state):
            return step
    return None


def complete_setup(
    setup_view_model: AccountSetupViewModel,
    forms: Mapping[SetupStep, FormViewModel],
) -> AccountDraft | None:
    """
    Build the finished AccountDraft once the wizard reaches its end.

    The wizard can start past the first step (see [wizard] initial_step),
    so reaching the end doesn't mean every form was filled in. If one
    wasn't, the wizard is rewound to it and None is returned.

    Args:
        setup_view_model: The wizard.
        forms: The form view model of each step.

    Returns:
        The draft, or None if a step still needs input.
    """
    step = first_incomplete_step(forms)
    if step is not None:
        logger.info(f"Account setup not finished, returning to {step.name}")
        setup_view_model.rewind_to(step)
        return None

    return AccountDraft.from_states(
        forms[SetupStep.AUTO_CONFIG].current_state,
        forms[SetupStep.INCOMING_CONFIG].current_state,
        forms[SetupStep.OUTGOING_CONFIG].current_state,
        forms[SetupStep.OPTIONS].current_state,
    )


class AccountSetupScreen(Screen[AccountDraft | None]):
    """
    The four-step account setup wizard.

    Returns:
        The finished AccountDraft, or None if the user backed out.
    """

    BINDINGS = [
        Binding("escape", "back", "Back"),
        Binding("ctrl+n", "next", "Next"),
    ]

    CSS = """
    #setup-header {
        height: auto;
        margin: 1 2;
    }

    #setup-title {
        text-style: bold;
        color: $accent;
    }

    #avatar {
        width: auto;
        height: auto;
        margin-right: 2;
    }

    #step-title {
        text-style: bold;
        margin: 0 2 1 2;
    }

    ContentSwitcher {
        margin: 0 2;
        height: 1fr;
    }

    .field-error {
        color: $error;
        height: auto;
        margin-bottom: 1;
    }

    #nav-buttons {
        dock: bottom;
        height: 3;
        align: center middle;
        margin-bottom: 1;
    }

    #nav-buttons Button {
        margin: 0 1;
    }
    """

    def __init__(
        self,
        setup_view_model: AccountSetupViewModel,
        auto_config_view_model: AccountAutoConfigViewModel,
        incoming_view_model: AccountIncomingConfigViewModel,
        outgoing_view_model: AccountOutgoingConfigViewModel,
        options_view_model: AccountOptionsViewModel,
        photo_loader: ContactPhotoLoader | None = None,
    ) -> None:
        """
        Args:
            setup_view_model: Step state machine.
            auto_config_view_model: Email address / password step.
            incoming_view_model: IMAP server step.
            outgoing_view_model: SMTP server step.
            options_view_model: Account options step.
            photo_loader: Looks up the user's contact photo once their
                          email address is accepted. Optional.
        """
        super().__init__()
        self.setup_view_model = setup_view_model
        self.auto_config_view_model = auto_config_view_model
        self.incoming_view_model = incoming_view_model
        self.outgoing_view_model = outgoing_view_model
        self.options_view_model = options_view_model
        self.photo_loader = photo_loader
        self._unsubscribers: list = []

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    def compose(self) -> ComposeResult:
        with Horizontal(id="setup-header"):
            yield Static("", id="avatar")
            yield Static("Account Setup", id="setup-title")
        yield Static("", id="step-title")

        initial_panel = STEP_PANELS[self.setup_view_model.current_state.setup_step]
        with ContentSwitcher(initial=initial_panel):
            with Vertical(id="panel-auto-config"):
                yield from self._field("email-address", "Email address")
                yield from self._field("auto-password", "Password", password=True)
            with Vertical(id="panel-incoming"):
                yield from self._server_fields("incoming", self.incoming_view_model)
            with Vertical(id="panel-outgoing"):
                yield from self._server_fields("outgoing", self.outgoing_view_model)
            with Vertical(id="panel-options"):
                yield from self._field("account-name", "Account name (optional)")
                yield from self._field("display-name", "Your name")
                yield from self._field("email-signature", "Signature (optional)")

        with Horizontal(id="nav-buttons"):
            yield Button("Back", id="back-btn")
            yield Button("Next", id="next-btn", variant="primary")
        yield Footer()

    def _field(
        self,
        field_id: str,
        placeholder: str,
        password: bool = False,
        value: str = "",
        input_type: str = "text",
    ) -> ComposeResult:
        yield Input(
            value=value,
            placeholder=placeholder,
            password=password,
            type=input_type,
            id=field_id,
        )
        yield Static("", id=f"{field_id}-error", classes="field-error")

    def _server_fields(self, prefix: str, view_model: FormViewModel) -> ComposeResult:
        state: serverconfig.State = view_model.current_state
        port = "" if state.port.value is None else str(state.port.value)

        yield from self._field(f"{prefix}-server", "Server")
        yield Select(
            SECURITY_OPTIONS,
            value=state.security,
            allow_blank=False,
            id=f"{prefix}-security",
        )
        yield from self._field(f"{prefix}-port", "Port", value=port, input_type="integer")
        yield from self._field(f"{prefix}-username", "Username")
        yield from self._field(f"{prefix}-password", "Password", password=True)

    # -------------------------------------------------------------------------
    # Subscriptions
    # -------------------------------------------------------------------------

    def on_mount(self) -> None:
        """Subscribe to every view model once the widgets exist."""
        subscriptions = [
            self.setup_view_model.state.subscribe(self._render_step),
            self.setup_view_model.effect.subscribe(self._on_setup_effect),
            self.auto_config_view_model.state.subscribe(self._render_auto_config),
            self.incoming_view_model.state.subscribe(
                lambda state: self._render_server("incoming", state)
            ),
            self.outgoing_view_model.state.subscribe(
                lambda state: self._render_server("outgoing", state)
            ),
            self.options_view_model.state.subscribe(self._render_options),
        ]
        for view_model in self._form_view_models():
            subscriptions.append(view_model.effect.subscribe(self._on_form_effect))
        self._unsubscribers = subscriptions

    def on_unmount(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def _forms(self) -> dict[SetupStep, FormViewModel]:
        return {
            SetupStep.AUTO_CONFIG: self.auto_config_view_model,
            SetupStep.INCOMING_CONFIG: self.incoming_view_model,
            SetupStep.OUTGOING_CONFIG: self.outgoing_view_model,
            SetupStep.OPTIONS: self.options_view_model,
        }

    def _form_view_models(self) -> list[FormViewModel]:
        return list(self._forms().values())

    def _current_form(self) -> FormViewModel:
        return self._forms()[self.setup_view_model.current_state.setup_step]

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _render_step(self, state) -> None:
        self.query_one(ContentSwitcher).current = STEP_PANELS[state.setup_step]
        self.query_one("#step-title", Static).update(STEP_TITLES[state.setup_step])
        self.query_one("#next-btn", Button).label = (
            "Finish" if state.setup_step is SetupStep.last() else "Next"
        )

    def _render_error(self, field_id: str, field: InputField) -> None:
        self.query_one(f"#{field_id}-error", Static).update(error_message(field))

    def _render_auto_config(self, state: autoconfig.State) -> None:
        self._render_error("email-address", state.email_address)
        self._render_error("auto-password", state.password)

    def _render_server(self, prefix: str, state: serverconfig.State) -> None:
        self._render_error(f"{prefix}-server", state.server)
        self._render_error(f"{prefix}-port", state.port)
        self._render_error(f"{prefix}-username", state.username)
        self._render_error(f"{prefix}-password", state.password)

        # Security changes rewrite the port, so push it back into the widget
        port_input = self.query_one(f"#{prefix}-port", Input)
        if parse_port(port_input.value) != state.port.value:
            port_input.value = "" if state.port.value is None else str(state.port.value)

    def _render_options(self, state: options.State) -> None:
        self._render_error("account-name", state.account_name)
        self._render_error("display-name", state.display_name)
        self._render_error("email-signature", state.email_signature)

    def _show_contact_photo(self) -> None:
        if self.photo_loader is None:
            return
        email = self.auto_config_view_model.current_state.email_address.value
        image = self.photo_loader.load_contact_photo(email)
        avatar = self.query_one("#avatar", Static)
        avatar.update(render_avatar(image) if image is not None else "")

    # -------------------------------------------------------------------------
    # Effects
    # -------------------------------------------------------------------------

    def _on_form_effect(self, effect: FormEffect) -> None:
        if effect is FormEffect.NAVIGATE_NEXT:
            if self.setup_view_model.current_state.setup_step is SetupStep.AUTO_CONFIG:
                self._show_contact_photo()
            self.setup_view_model.event(Event.ON_NEXT)
        elif effect is FormEffect.NAVIGATE_BACK:
            self.setup_view_model.event(Event.ON_BACK)

    def _on_setup_effect(self, effect: Effect) -> None:
        if effect is Effect.NAVIGATE_NEXT:
            draft = complete_setup(self.setup_view_model, self._forms())
            if draft is None:
                return
            logger.info(f"Account setup finished: {draft!r}")
            self.dismiss(draft)
        elif effect is Effect.NAVIGATE_BACK:
            logger.info("Account setup cancelled")
            self.dismiss(None)

    # -------------------------------------------------------------------------
    # Widget Events
    # -------------------------------------------------------------------------

    def on_input_changed(self, event: Input.Changed) -> None:
        """Forward every keystroke to the view model that owns the field."""
        field_id = event.input.id or ""
        value = event.value

        if field_id == "email-address":
            self.auto_config_view_model.event(autoconfig.EmailAddressChanged(value))
        elif field_id == "auto-password":
            self.auto_config_view_model.event(autoconfig.PasswordChanged(value))
        elif field_id == "account-name":
            self.options_view_model.event(options.AccountNameChanged(value))
        elif field_id == "display-name":
            self.options_view_model.event(options.DisplayNameChanged(value))
        elif field_id == "email-signature":
            self.options_view_model.event(options.EmailSignatureChanged(value))
        elif "-" in field_id:
            prefix, name = field_id.split("-", 1)
            view_model = self._server_view_model(prefix)
            if view_model is not None:
                self._forward_server_field(view_model, name, value)

    def _server_view_model(self, prefix: str) -> FormViewModel | None:
        if prefix == "incoming":
            return self.incoming_view_model
        if prefix == "outgoing":
            return self.outgoing_view_model
        return None

    def _forward_server_field(self, view_model: FormViewModel, name: str, value: str) -> None:
        if name == "server":
            view_model.event(serverconfig.ServerChanged(value))
        elif name == "port":
            view_model.event(serverconfig.PortChanged(parse_port(value)))
        elif name == "username":
            view_model.event(serverconfig.UsernameChanged(value))
        elif name == "password":
            view_model.event(serverconfig.PasswordChanged(value))

    def on_select_changed(self, event: Select.Changed) -> None:
        if not isinstance(event.value, ConnectionSecurity):
            return
        prefix = (event.select.id or "").split("-", 1)[0]
        view_model = self._server_view_model(prefix)
        if view_model is not None:
            view_model.event(serverconfig.SecurityChanged(event.value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "next-btn":
            self.action_next()
        elif event.button.id == "back-btn":
            self.action_back()

    def action_next(self) -> None:
        self._current_form().event(FormAction.ON_NEXT_CLICKED)

    def action_back(self) -> None:
        self._current_form().event(FormAction.ON_BACK_CLICKED)
