import os

class Settings:
    # Development
    USE_MOCK: bool = os.getenv("USE_MOCK", "0").lower() in ("1", "true", "yes")

    # Page loading
    PAGE_LOADER: str = os.getenv("PAGE_LOADER", "httpx")
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "15"))
    USER_AGENT: str = os.getenv(
        "USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/127.0.0.0 Safari/537.36",
    )
    ACCEPT_LANGUAGE: str = os.getenv("ACCEPT_LANGUAGE", "fr,en;q=0.8")

    # Extraction
    EXCERPT_LENGTH: int = int(os.getenv("EXCERPT_LENGTH", "200"))

settings = Settings()
