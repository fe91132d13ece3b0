import pytest
from unfurl.core import config
from unfurl.fetch.dom import SoupElement

@pytest.fixture(autouse=True)
def setup_test_environment():
    """Setup test environment with predictable settings"""
    # Store original values
    original_use_mock = config.settings.USE_MOCK
    original_loader = config.settings.PAGE_LOADER
    original_excerpt_length = config.settings.EXCERPT_LENGTH

    # Override settings for tests - real loaders are patched per test
    config.settings.USE_MOCK = False
    config.settings.PAGE_LOADER = "httpx"
    config.settings.EXCERPT_LENGTH = 200

    yield

    # Restore original values
    config.settings.USE_MOCK = original_use_mock
    config.settings.PAGE_LOADER = original_loader
    config.settings.EXCERPT_LENGTH = original_excerpt_length

@pytest.fixture
def make_document():
    """Parse an HTML string into a document"""
    return SoupElement.from_html
