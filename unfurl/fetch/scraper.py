import httpx
from typing import Optional
from unfurl.core.config import settings
from .base import Element, PageLoader
from .dom import SoupElement

def _headers() -> dict:
    return {
        "User-Agent": settings.USER_AGENT,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": settings.ACCEPT_LANGUAGE,
    }

class HttpxLoader(PageLoader):
    """Default loader. Follows redirects; any HTTP or network error means no page."""

    def __init__(self, transport: Optional[httpx.BaseTransport] = None):
        self._transport = transport

    def fetch_html(self, url: str, timeout_sec: Optional[int] = None) -> Optional[str]:
        try:
            with httpx.Client(
                timeout=timeout_sec or settings.REQUEST_TIMEOUT,
                headers=_headers(),
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = client.get(url)
                response.raise_for_status()
                return response.text
        except httpx.TimeoutException:
            print(f"LOAD FAILED for {url}: timeout")
        except httpx.HTTPStatusError as e:
            print(f"LOAD FAILED for {url}: HTTP {e.response.status_code}")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            print(f"LOAD FAILED for {url}: {e}")
        return None

    def load(self, url: str, timeout_sec: Optional[int] = None) -> Optional[Element]:
        html = self.fetch_html(url, timeout_sec)
        if not html:
            return None
        return SoupElement.from_html(html)

class MockLoader(PageLoader):
    """Canned pages for working without network access (USE_MOCK=1)."""

    def load(self, url: str, timeout_sec: Optional[int] = None) -> Optional[Element]:
        html = _mock_html(url)
        return SoupElement.from_html(html) if html else None

def _mock_html(url: str) -> Optional[str]:
    # Generate different mock content based on URL
    if "unreachable" in url.lower():
        return None

    if "video" in url.lower():
        return """
        <html>
        <head>
            <title>Le Petit Bistrot - visite en vidéo</title>
            <meta property="og:title" content="Visite du Petit Bistrot">
            <meta property="og:video" content="https://videos.example.com/bistrot.mp4">
            <meta property="og:video:type" content="video/mp4">
            <meta property="og:video:width" content="1280">
            <meta property="og:video:height" content="720">
        </head>
        <body>
            <h1>Visite en vidéo</h1>
            <p>Découvrez la salle et la cuisine du Petit Bistrot.</p>
        </body>
        </html>
        """

    # Generic mock page
    return """
    <html>
    <head>
        <title>Le Petit Bistrot</title>
        <meta name="description" content="Restaurant de quartier à Lyon">
        <meta property="og:description" content="Cuisine lyonnaise traditionnelle, menu du jour et vins locaux.">
        <meta property="og:image" content="https://www.example.com/img/facade.jpg">
    </head>
    <body>
        <header><nav>Accueil | Carte | Contact</nav></header>
        <main>
            <h1>Le Petit Bistrot</h1>
            <p>Depuis 1987, le Petit Bistrot sert une cuisine lyonnaise traditionnelle
            au coeur de la Croix-Rousse. Chaque midi, le chef propose un menu du jour
            composé d'une entrée, d'un plat et d'un dessert, préparés avec des produits
            du marché. Le soir, la carte met à l'honneur les quenelles, le saucisson
            brioché et la tarte aux pralines.</p>
            <img src="https://www.example.com/img/salle.jpg" alt="La salle">
            <img src="/img/logo.png" alt="Logo">
            <img src="https://www.example.com/img/plat.png?w=640" alt="Plat du jour">
        </main>
        <script>var tracking = true;</script>
    </body>
    </html>
    """
