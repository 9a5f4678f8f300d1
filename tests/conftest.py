"""
Shared pytest fixtures and configuration for Alphabar tests.

This module provides common fixtures used across unit and integration tests,
including sample records, in-memory sources, mocked boto3 clients and
LocalStack helpers.
"""

import os
from typing import TYPE_CHECKING, Any
from unittest.mock import MagicMock

import pytest
from pydantic import BaseModel

from alphabar import DynamoSource, InMemorySource

if TYPE_CHECKING:
    from tests.helpers.localstack import LocalStackHelper


class Person(BaseModel):
    """Record model shared by the in-memory and DynamoDB tests."""

    person_id: str
    last_name: str | None = None
    first_name: str = ""


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "integration: Integration tests against LocalStack")


@pytest.fixture(autouse=True)
def clean_alphabar_env(monkeypatch):
    """AlphabarConfig reads ALPHABAR_* variables; keep the caller's shell out of tests."""
    for name in list(os.environ):
        if name.upper().startswith("ALPHABAR_"):
            monkeypatch.delenv(name)


@pytest.fixture
def person_model() -> type[Person]:
    return Person


@pytest.fixture
def people() -> list[Person]:
    """
    A small directory: A(2) B(1) S(3) Blank(2) and one non-letter name.
    """
    return [
        Person(person_id="1", last_name="Adams", first_name="Ann"),
        Person(person_id="2", last_name="allen", first_name="Al"),
        Person(person_id="3", last_name="Brown", first_name="Bo"),
        Person(person_id="4", last_name="Smith", first_name="Sam"),
        Person(person_id="5", last_name="stone", first_name="Sid"),
        Person(person_id="6", last_name="Summers", first_name="Sue"),
        Person(person_id="7", last_name="", first_name="Nobody"),
        Person(person_id="8", last_name=None, first_name="Unknown"),
        Person(person_id="9", last_name="8th Street Co", first_name=""),
    ]


@pytest.fixture
def people_source(people) -> InMemorySource[Person]:
    return InMemorySource(people, model=Person)


@pytest.fixture
def fruit_records() -> list[dict[str, Any]]:
    """The canonical mixed-case/blank scenario."""
    return [
        {"id": 1, "name": "apple"},
        {"id": 2, "name": "Banana"},
        {"id": 3, "name": ""},
        {"id": 4, "name": "banana"},
        {"id": 5, "name": None},
    ]


@pytest.fixture
def fruit_source(fruit_records) -> InMemorySource[dict[str, Any]]:
    return InMemorySource(fruit_records)


@pytest.fixture
def empty_source() -> InMemorySource[dict[str, Any]]:
    return InMemorySource([], fields=["name"])


@pytest.fixture
def mock_client():
    """
    Creates a fully mocked boto3 DynamoDB client.

    client.get_paginator("scan").paginate(...) returns whatever the test
    assigns to mock_client.scan_pages (a list of scan responses).
    """
    client = MagicMock()
    client.scan_pages = []
    scan_paginator = MagicMock()
    scan_paginator.paginate.side_effect = lambda **kwargs: iter(list(client.scan_pages))
    client.get_paginator.return_value = scan_paginator
    return client


@pytest.fixture
def dynamo_source(mock_client) -> DynamoSource[Person]:
    return DynamoSource(Person, table_name="test_people", client=mock_client)


# Integration Test Fixtures


@pytest.fixture(scope="session")
def localstack_endpoint() -> str:
    """Get LocalStack endpoint URL from environment or default."""
    return os.getenv("LOCALSTACK_ENDPOINT", "http://localhost:4566")


@pytest.fixture(scope="session")
def localstack_helper(localstack_endpoint: str) -> "LocalStackHelper":
    """Provides a LocalStackHelper instance; skips when LocalStack is not running."""
    from tests.helpers.localstack import LocalStackHelper

    helper = LocalStackHelper(endpoint_url=localstack_endpoint)
    if not helper.is_available():
        pytest.skip(f"LocalStack not reachable at {localstack_endpoint}")
    return helper


@pytest.fixture
def people_table(localstack_helper):
    """
    Creates a fresh people table for each test and cleans up after.
    """
    table_name = "integration_alphabar_people"
    localstack_helper.create_table(table_name, pk_name="person_id")
    localstack_helper.clear_table(table_name, pk_name="person_id")

    yield table_name

    localstack_helper.clear_table(table_name, pk_name="person_id")
