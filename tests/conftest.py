# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the mailsetup test suite.
# =============================================================================

import pytest
import tempfile
from enum import Enum, auto
from pathlib import Path

from mailsetup.core import ValidationError


class SampleError(ValidationError, Enum):
    """Stand-in errors for tests that don't care which validator failed."""
    FIRST = auto()
    SECOND = auto()


class Recorder:
    """Collects everything an observer receives."""

    def __init__(self) -> None:
        self.items: list = []

    def __call__(self, item) -> None:
        self.items.append(item)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def recorder():
    """A fresh observer that records what it receives."""
    return Recorder()


@pytest.fixture
def sample_png(temp_dir):
    """Write a small two-colour PNG and return its path."""
    from PIL import Image

    image = Image.new("RGB", (4, 4), (255, 0, 0))
    for x in range(4):
        image.putpixel((x, 3), (0, 0, 255))
    path = temp_dir / "photo.png"
    image.save(path, format="PNG")
    return path


@pytest.fixture
def sample_config_toml():
    """A complete, valid config file body."""
    return """
[general]
log_level = "debug"

[wizard]
initial_step = "incoming_config"

[defaults]
incoming_security = "STARTTLS"
outgoing_security = "none"

[contacts]
"jane@example.com" = "/photos/jane.png"
"""
