# =============================================================================
# mailsetup Main Application
# =============================================================================
# The Textual application that hosts the setup wizard.
#
# The app:
#   - loads configuration (falls back to defaults on a broken config file)
#   - builds the view models with explicit constructor arguments
#   - shows AccountSetupScreen and exits with its result
# =============================================================================

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from mailsetup import __app_name__, __version__
from mailsetup.config import Config, ConfigError, ensure_directories, print_paths, setup_logging
from mailsetup.contacts import ContactPhotoLoader, InMemoryContactDirectory
from mailsetup.core import AccountDraft
from mailsetup.ui.autoconfig import AccountAutoConfigViewModel
from mailsetup.ui.incoming import AccountIncomingConfigViewModel
from mailsetup.ui.options import AccountOptionsViewModel
from mailsetup.ui.outgoing import AccountOutgoingConfigViewModel
from mailsetup.ui.screens import AccountSetupScreen
from mailsetup.ui.setup import AccountSetupViewModel, State

logger = logging.getLogger(__name__)


@dataclass
class SetupComponents:
    """Everything the wizard screen needs, built from configuration."""
    setup_view_model: AccountSetupViewModel
    auto_config_view_model: AccountAutoConfigViewModel
    incoming_view_model: AccountIncomingConfigViewModel
    outgoing_view_model: AccountOutgoingConfigViewModel
    options_view_model: AccountOptionsViewModel
    photo_loader: ContactPhotoLoader | None = None


def create_components(config: Config) -> SetupComponents:
    """
    Build the view models (and photo loader) for the wizard.

    Args:
        config: Loaded configuration.
    """
    photo_loader = None
    if config.contact_photos:
        photo_loader = ContactPhotoLoader(InMemoryContactDirectory(config.contact_photos))

    return SetupComponents(
        setup_view_model=AccountSetupViewModel(
            State(setup_step=config.wizard.initial_step)
        ),
        auto_config_view_model=AccountAutoConfigViewModel(),
        incoming_view_model=AccountIncomingConfigViewModel(
            default_security=config.wizard.incoming_security,
        ),
        outgoing_view_model=AccountOutgoingConfigViewModel(
            default_security=config.wizard.outgoing_security,
        ),
        options_view_model=AccountOptionsViewModel(),
        photo_loader=photo_loader,
    )


def create_setup_screen(config: Config) -> AccountSetupScreen:
    """Build the wizard screen from configuration."""
    components = create_components(config)
    return AccountSetupScreen(
        setup_view_model=components.setup_view_model,
        auto_config_view_model=components.auto_config_view_model,
        incoming_view_model=components.incoming_view_model,
        outgoing_view_model=components.outgoing_view_model,
        options_view_model=components.options_view_model,
        photo_loader=components.photo_loader,
    )


class SetupApp(App[AccountDraft | None]):
    """
    The mailsetup application.

    Exits with the finished AccountDraft, or None if the user backed out
    of the first step or quit.

    Attributes:
        config: The loaded application configuration.
    """

    TITLE = "mailsetup"
    SUB_TITLE = "Email Account Setup"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(self, config: Config | None = None) -> None:
        """
        Args:
            config: Optional pre-loaded configuration. If not provided,
                    configuration will be loaded from the default location.
        """
        super().__init__()

        self._config_error: str | None = None

        if config is None:
            try:
                self.config = Config.load()
            except ConfigError as e:
                logger.warning(f"Falling back to default config: {e}")
                self.config = Config()
                self._config_error = str(e)
        else:
            self.config = config

    async def on_mount(self) -> None:
        """Called when the application is mounted and ready."""
        if self._config_error:
            self.notify(
                f"Config error: {self._config_error}",
                severity="error",
                timeout=10,
            )

        await self.push_screen(create_setup_screen(self.config), self._on_setup_done)

    def _on_setup_done(self, draft: AccountDraft | None) -> None:
        self.exit(draft)


# =============================================================================
# CLI Entry Point
# =============================================================================

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="mailsetup: set up an email account from the terminal",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--paths",
        action="store_true",
        help="Print configuration paths and exit",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: XDG config location)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (verbose logging)",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for mailsetup.

    This function:
        1. Parses command-line arguments
        2. Handles special commands (--paths, --version)
        3. Loads configuration and sets up logging
        4. Runs the wizard and prints the configured account

    Returns:
        Exit code (0 when an account was set up, 1 on errors or cancel).
    """
    args = parse_args(argv)

    if args.paths:
        print_paths()
        return 0

    ensure_directories()

    try:
        config = Config.load(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging("DEBUG" if args.debug else config.log_level)
    logger.info(f"mailsetup {__version__} starting")

    draft = SetupApp(config=config).run()
    if draft is None:
        print("Account setup cancelled.")
        return 1

    print(f"Configured account: {draft}")
    print(f"  Incoming: {draft.imap_host}:{draft.imap_port} ({draft.imap_security.value})")
    print(f"  Outgoing: {draft.smtp_host}:{draft.smtp_port} ({draft.smtp_security.value})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
