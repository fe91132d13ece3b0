class FetcherError(Exception):
    """Base class for page fetching failures."""

class InvalidUrlError(FetcherError, ValueError):
    def __init__(self, url: str):
        super().__init__(f"Bad URL: {url}")
        self.url = url

class LoadFailureError(FetcherError, RuntimeError):
    def __init__(self, url: str):
        super().__init__(f"Unable to load URL: {url}")
        self.url = url

class MissingElementError(FetcherError, LookupError):
    """The page lacks a <title>, <head> or <body> element."""

    def __init__(self, tag: str):
        super().__init__(f"Missing <{tag}> element")
        self.tag = tag
