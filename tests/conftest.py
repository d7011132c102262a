"""Pytest configuration and fixtures."""

import pytest

from config import Settings
from session import WizardSession
from templates import TEMPLATES_BY_NAME


@pytest.fixture
def settings():
    """Default settings, isolated from any local .env or HOTCRAZY_ variables."""
    return Settings(_env_file=None)


@pytest.fixture
def wizard(settings):
    """Fresh wizard with no criteria or people."""
    return WizardSession(settings)


@pytest.fixture
def classic_wizard(wizard):
    """Wizard preloaded with the Classic Dating template."""
    wizard.load_template(TEMPLATES_BY_NAME["Classic Dating"])
    return wizard
