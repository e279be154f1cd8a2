# tests/conftest.py
import os

import pytest
from dotenv import load_dotenv

from shelfloom.client import BookStackClient
from shelfloom.config import ShelfloomSettings

# Load environment variables from .env file if it exists
# Useful for pointing live checks at a local BookStack instance
load_dotenv()

BASE_URL = "https://wiki.example.org/api/"


@pytest.fixture(scope="session")
def live_base_url() -> str | None:
    """Fixture to provide a live BookStack API root from environment variables."""
    return os.getenv("SHELFLOOM_BASE_URL")


@pytest.fixture
def settings() -> ShelfloomSettings:
    """Settings isolated from the environment and .env files."""
    return ShelfloomSettings(
        _env_file=None,
        base_url=BASE_URL,
        token_id="tid",
        token_secret="tsecret",
        batch_count=2,
    )


@pytest.fixture
def client(settings: ShelfloomSettings) -> BookStackClient:
    """A BookStackClient whose HTTP traffic is served by httpx_mock."""
    return BookStackClient(settings=settings)
