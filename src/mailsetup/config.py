# =============================================================================
# Configuration Management
# =============================================================================
# Loads mailsetup's settings. The wizard never writes this file; it only
# reads preferences that shape how the wizard starts.
#
# XDG Base Directory Compliance (https://specifications.freedesktop.org/basedir-spec/):
#   - Config:  $XDG_CONFIG_HOME/mailsetup/  (default: ~/.config/mailsetup/)
#   - State:   $XDG_STATE_HOME/mailsetup/   (default: ~/.local/state/mailsetup/)
#
# Files:
#   - config.toml:   User settings (see Config below)
#   - mailsetup.log: Log output (in state directory)
#
# Example config.toml:
#
#   [general]
#   log_level = "DEBUG"
#
#   [wizard]
#   initial_step = "AUTO_CONFIG"
#
#   [defaults]
#   incoming_security = "tls"        # none | starttls | tls
#   outgoing_security = "starttls"
#
#   [contacts]
#   "jane@example.com" = "/home/jane/.face"
# =============================================================================

import logging
import os
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from mailsetup.core.security import ConnectionSecurity
from mailsetup.ui.setup.contract import SetupStep


# =============================================================================
# XDG Directory Management
# =============================================================================

# Application identifier used in all XDG paths
APP_NAME = "mailsetup"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_xdg_config_home() -> Path:
    """
    Returns the XDG config directory for mailsetup.

    Respects $XDG_CONFIG_HOME if set, otherwise uses ~/.config/mailsetup/
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


def get_xdg_state_home() -> Path:
    """
    Returns the XDG state directory for mailsetup.

    Respects $XDG_STATE_HOME if set, otherwise uses ~/.local/state/mailsetup/
    The log file lives here.
    """
    xdg_state = os.environ.get("XDG_STATE_HOME")
    if xdg_state:
        base = Path(xdg_state)
    else:
        base = Path.home() / ".local" / "state"
    return base / APP_NAME


def ensure_directories() -> dict[str, Path]:
    """
    Creates the XDG directories if they don't exist.

    Returns:
        Dictionary mapping directory type to path.
    """
    dirs = {
        "config": get_xdg_config_home(),
        "state": get_xdg_state_home(),
    }

    for dir_path in dirs.values():
        dir_path.mkdir(parents=True, exist_ok=True)

    return dirs


# =============================================================================
# Configuration Data Structures
# =============================================================================

@dataclass
class WizardConfig:
    """
    How the wizard starts.

    Attributes:
        initial_step: Step shown first. Handy for resuming or for
                      jumping straight to server settings.
        incoming_security: Security preselected for the IMAP server.
        outgoing_security: Security preselected for the SMTP server.
    """
    initial_step: SetupStep = SetupStep.AUTO_CONFIG
    incoming_security: ConnectionSecurity = ConnectionSecurity.TLS
    outgoing_security: ConnectionSecurity = ConnectionSecurity.TLS


@dataclass
class Config:
    """
    Main configuration container for mailsetup.

    Attributes:
        log_level: Level for the mailsetup logger ("DEBUG" ... "CRITICAL").
        wizard: Wizard start-up preferences.
        contact_photos: Email address -> photo path, used to show the
                        user's picture while they set up the account.

    Usage:
        >>> config = Config.load()
        >>> config.wizard.initial_step
        <SetupStep.AUTO_CONFIG: 1>
    """
    log_level: str = "WARNING"
    wizard: WizardConfig = field(default_factory=WizardConfig)
    contact_photos: dict[str, str] = field(default_factory=dict)

    # -------------------------------------------------------------------------
    # File Paths
    # -------------------------------------------------------------------------

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the main config file."""
        return get_xdg_config_home() / "config.toml"

    @staticmethod
    def log_file_path() -> Path:
        """Returns the path to the log file."""
        return get_xdg_state_home() / "mailsetup.log"

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """
        Load configuration from a TOML file.

        If the file doesn't exist, returns default configuration.

        Args:
            path: Config file to read. Defaults to the XDG location.

        Returns:
            Loaded Config object.

        Raises:
            ConfigError: If the config file exists but is invalid.
        """
        config_path = path or cls.config_file_path()

        if not config_path.exists():
            # No config file yet - return defaults
            return cls()

        # Load and parse the TOML file
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file {config_path}: {e}") from e

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Create a Config object from a dictionary (parsed TOML).

        Raises:
            ConfigError: If a value has the wrong type or an unknown name.
        """
        config = cls()

        # General settings
        general = _section(data, "general")
        log_level = str(general.get("log_level", "WARNING")).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log_level: {log_level!r}")
        config.log_level = log_level

        # Wizard settings
        wizard = _section(data, "wizard")
        defaults = _section(data, "defaults")
        config.wizard = WizardConfig(
            initial_step=_parse_step(wizard.get("initial_step", "AUTO_CONFIG")),
            incoming_security=_parse_security(defaults.get("incoming_security", "tls")),
            outgoing_security=_parse_security(defaults.get("outgoing_security", "tls")),
        )

        # Contacts - each key is an email address, each value a photo path
        contacts = _section(data, "contacts")
        for address, photo in contacts.items():
            if not isinstance(photo, str):
                raise ConfigError(f"Photo for {address} must be a path string")
            config.contact_photos[address] = photo

        return config


# =============================================================================
# Exceptions
# =============================================================================

class ConfigError(Exception):
    """Raised when there's an error loading or parsing configuration."""
    pass


# =============================================================================
# Parsing Helpers
# =============================================================================

def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table")
    return section


def _parse_step(value: Any) -> SetupStep:
    try:
        return SetupStep[str(value).strip().upper()]
    except KeyError:
        raise ConfigError(f"Unknown initial_step: {value!r}") from None


def _parse_security(value: Any) -> ConnectionSecurity:
    try:
        return ConnectionSecurity.from_name(str(value))
    except ValueError:
        raise ConfigError(f"Unknown connection security: {value!r}") from None


# =============================================================================
# Utility Functions
# =============================================================================

def print_paths() -> None:
    """
    Print all paths for debugging.
    Useful for users wondering where their config and logs are.
    """
    print(f"Config:  {get_xdg_config_home()}")
    print(f"State:   {get_xdg_state_home()}")
    print()
    print(f"Config file:  {Config.config_file_path()}")
    print(f"Log file:     {Config.log_file_path()}")


def setup_logging(level: str, log_file: Path | None = None) -> logging.Logger:
    """
    Configure the mailsetup logger.

    Output goes to a file, never to the terminal, since the terminal belongs
    to the UI while the wizard runs.

    Args:
        level: Log level name.
        log_file: Where to write. Defaults to the XDG state location.

    Returns:
        The configured "mailsetup" logger.
    """
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(level)

    log_path = log_file or Config.log_file_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    if not logger.handlers:
        handler = logging.FileHandler(log_path)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        ))
        logger.addHandler(handler)
    return logger
