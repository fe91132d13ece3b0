import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient
from unfurl.main import app
from unfurl.core import config
from unfurl.fetch.errors import LoadFailureError, MissingElementError
from unfurl.schemas import FetchResult

# Test client
client = TestClient(app)

class TestIntegrationFetch:
    """Integration tests for the /fetch endpoint"""

    @patch('unfurl.services.fetch.fetch_page')
    def test_fetch_endpoint_success(self, mock_fetch):
        """Test successful page fetch"""
        mock_fetch.return_value = FetchResult(
            title="Le Petit Bistrot",
            text="Cuisine lyonnaise",
            images=["http://x.com/salle.jpg"],
            metas={"description": "Restaurant"}
        )

        response = client.post("/fetch", json={"url": "https://bistrot.example.com"})

        assert response.status_code == 200
        assert response.json() == {
            "title": "Le Petit Bistrot",
            "text": "Cuisine lyonnaise",
            "images": ["http://x.com/salle.jpg"],
            "metas": {"description": "Restaurant"}
        }
        mock_fetch.assert_called_once_with("https://bistrot.example.com")

    def test_fetch_invalid_url(self):
        """Test endpoint with invalid URL"""
        response = client.post("/fetch", json={"url": "not-a-url"})

        assert response.status_code == 400
        assert "Bad URL" in response.json()["detail"]

    def test_fetch_missing_url(self):
        """Test endpoint with missing URL"""
        response = client.post("/fetch", json={})

        assert response.status_code == 422  # Validation error

    @patch('unfurl.services.fetch.fetch_page')
    def test_fetch_load_failure(self, mock_fetch):
        """Test handling of unreachable pages"""
        mock_fetch.side_effect = LoadFailureError("https://unreachable.example.com")

        response = client.post("/fetch", json={"url": "https://unreachable.example.com"})

        assert response.status_code == 502
        assert "Unable to load URL" in response.json()["detail"]

    @patch('unfurl.services.fetch.fetch_page')
    def test_fetch_malformed_page(self, mock_fetch):
        """Test handling of pages without title"""
        mock_fetch.side_effect = MissingElementError("title")

        response = client.post("/fetch", json={"url": "https://bistrot.example.com"})

        assert response.status_code == 422
        assert "<title>" in response.json()["detail"]

    @patch('unfurl.services.fetch.fetch_page')
    def test_fetch_unexpected_error(self, mock_fetch):
        """Test handling of unexpected errors"""
        mock_fetch.side_effect = Exception("Parser exploded")

        response = client.post("/fetch", json={"url": "https://bistrot.example.com"})

        assert response.status_code == 500
        assert "failed" in response.json()["detail"].lower()

class TestMockModeIntegration:
    """End-to-end tests with the offline page loader"""

    @pytest.fixture(autouse=True)
    def mock_mode(self, setup_test_environment):
        """Enable mock mode once settings are pinned"""
        config.settings.USE_MOCK = True

    def test_full_flow(self):
        """Test complete fetch and extraction of a canned page"""
        response = client.post("/fetch", json={"url": "https://bistrot.example.com"})

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Le Petit Bistrot"
        assert data["text"].startswith("Accueil | Carte | Contact")
        assert "tracking" not in data["text"]
        assert len(data["text"]) >= 200
        assert data["images"] == [
            "https://www.example.com/img/salle.jpg",
            "https://www.example.com/img/plat.png"
        ]
        assert data["metas"] == {
            "description": "Cuisine lyonnaise traditionnelle, menu du jour et vins locaux.",
            "image": "https://www.example.com/img/facade.jpg"
        }

    def test_video_page(self):
        """Test video metadata of a canned page"""
        response = client.post("/fetch", json={"url": "https://bistrot.example.com/video"})

        assert response.status_code == 200
        metas = response.json()["metas"]
        assert metas["title"] == "Visite du Petit Bistrot"
        assert metas["video_type"] == "video/mp4"
        assert metas["video_width"] == "1280"
        assert metas["video_height"] == "720"

    def test_unreachable_page(self):
        """Test simulated load failure"""
        response = client.post("/fetch", json={"url": "https://unreachable.example.com"})

        assert response.status_code == 502

class TestServiceEndpoints:
    """Tests for info endpoints"""

    def test_health(self):
        """Test health check endpoint"""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self):
        """Test root endpoint"""
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["endpoints"]["fetch"] == "POST /fetch"
