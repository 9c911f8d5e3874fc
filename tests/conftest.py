"""
Pytest configuration for password_renderer
"""

import logging
import sys

import pytest

from password_renderer.context import StaticRenderContext
from password_renderer.models import CustomField, Document, DocumentRef, Element, PasswordRecord


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid leaking handlers between tests."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)  # Only show warnings and errors during tests
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def accounts_ref():
    return DocumentRef("/accounts.html", book="/docs")


@pytest.fixture
def servers_ref():
    return DocumentRef("/servers.html", book="/docs")


@pytest.fixture
def accounts_document(accounts_ref):
    """Accessible document with one authored and one generated element id."""
    return Document.with_elements(
        accounts_ref,
        "Accounts",
        Element("billing", "Billing account", link_css_class="account-link"),
        Element("section-3", "Generated section"),
        generated_ids=frozenset({"section-3"}),
    )


@pytest.fixture
def servers_document(servers_ref):
    return Document(servers_ref, "Servers")


@pytest.fixture
def render_context(accounts_document, servers_document):
    """Context with two capturable documents, nothing in the batch."""
    return StaticRenderContext(
        documents=[accounts_document, servers_document],
        inaccessible_books=["/private"],
        context_path="/app",
    )


@pytest.fixture
def batch_context(accounts_document, servers_document, accounts_ref, servers_ref):
    """Context rendering both documents in one batch, servers first."""
    return StaticRenderContext(
        documents=[accounts_document, servers_document],
        batch=[servers_ref, accounts_ref],
        context_path="/app",
    )


@pytest.fixture
def sample_records():
    """Three records sharing a site, the second with two secret questions."""
    return [
        PasswordRecord(
            "s3cret",
            id="pw1",
            href="https://example.com/",
            username="alice",
            custom_fields={"Environment": "production"},
        ),
        PasswordRecord(
            "hunter2",
            href="https://example.com/",
            username="bob",
            custom_fields={"Environment": "production"},
            secret_questions={"First pet?": "Rex", "Birth city?": "Gdansk"},
        ),
        PasswordRecord(
            "letmein",
            href="https://other.example.com/",
            custom_fields={"Environment": CustomField.literal("staging")},
        ),
    ]


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    # Ignore logging errors during tests
    logging.raiseExceptions = False
