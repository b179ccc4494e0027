"""Shared pytest fixtures for DocuSign tools tests."""

import json
from pathlib import Path

import pytest

from docusign_tools.config import Config

FIXTURES_DIR = Path(__file__).parent / "fixtures"

BASE_URL = "https://demo.docusign.net/restapi"


def load_fixture(name: str) -> dict:
    """Load a JSON fixture file."""
    return json.loads((FIXTURES_DIR / name).read_text())


@pytest.fixture
def mock_config():
    """Create mock application config."""
    return Config(
        access_token="test_access_token",
        base_url=BASE_URL,
        account_id="A1",
    )


@pytest.fixture
def connect_config_results():
    """Load Connect configuration list fixture."""
    return load_fixture("connect_config_results.json")


@pytest.fixture
def connect_users_response():
    """Load Connect users fixture."""
    return load_fixture("connect_users_response.json")


@pytest.fixture
def billing_payments_response():
    """Load billing payments list fixture."""
    return load_fixture("billing_payments_response.json")


@pytest.fixture
def billing_payment_item():
    """Load single billing payment fixture."""
    return load_fixture("billing_payment_item.json")
