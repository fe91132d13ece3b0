from typing import Optional
from unfurl.core.config import settings
from unfurl.fetch.base import PageLoader
from unfurl.fetch.errors import InvalidUrlError, LoadFailureError
from unfurl.fetch.extractor import extract
from unfurl.fetch.requests_fetcher import RequestsLoader
from unfurl.fetch.scraper import HttpxLoader, MockLoader
from unfurl.fetch.utils import is_valid_url
from unfurl.schemas import FetchResult

LOADERS = {
    "httpx": HttpxLoader,
    "requests": RequestsLoader,
}

def get_loader(name: Optional[str] = None) -> PageLoader:
    """Page loader picked from settings (mock mode wins)."""
    if settings.USE_MOCK:
        return MockLoader()

    name = name or settings.PAGE_LOADER
    try:
        return LOADERS[name]()
    except KeyError:
        raise ValueError(f"Unknown page loader: {name}")

class Fetcher:
    """
    Fetch a page and summarize it.

    1. Validate the URL
    2. Load and parse the page
    3. Extract title, metas, text excerpt and images
    """

    def __init__(self, loader: Optional[PageLoader] = None, excerpt_length: Optional[int] = None):
        self.loader = loader or get_loader()
        self.excerpt_length = settings.EXCERPT_LENGTH if excerpt_length is None else excerpt_length

    def fetch(self, url: str) -> FetchResult:
        if not is_valid_url(url):
            raise InvalidUrlError(url)

        print(f"FETCHING {url}...")
        document = self.loader.load(url)
        if not document:
            raise LoadFailureError(url)

        result = extract(document, self.excerpt_length)
        print(f"EXTRACTED {url}: {len(result.text)} chars, {len(result.images)} images, metas={sorted(result.metas)}")
        return result

def fetch_page(url: str) -> FetchResult:
    return Fetcher().fetch(url)
