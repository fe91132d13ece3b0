from typing import Optional
import requests

from unfurl.core.config import settings
from .base import Element, PageLoader
from .dom import SoupElement

class RequestsLoader(PageLoader):
    def load(self, url: str, timeout_sec: Optional[int] = None) -> Optional[Element]:
        headers = {"User-Agent": settings.USER_AGENT, "Accept-Language": settings.ACCEPT_LANGUAGE}
        try:
            resp = requests.get(url, headers=headers, timeout=timeout_sec or settings.REQUEST_TIMEOUT)
        except requests.RequestException as e:
            print(f"LOAD FAILED for {url}: {e}")
            return None

        if not resp.ok or not resp.text:
            print(f"LOAD FAILED for {url}: HTTP {resp.status_code}")
            return None

        return SoupElement.from_html(resp.text)
