import json
from datetime import timezone

from services.shared.utils import SystemClock, api_response


class TestApiResponse:
    def test_builds_http_api_response(self):
        response = api_response(201, {"status": "success", "data": {"seat": "B4"}})

        assert response["statusCode"] == 201
        assert response["headers"]["Content-Type"].startswith("application/json")
        assert json.loads(response["body"])["data"] == {"seat": "B4"}

    def test_keeps_non_ascii_text(self):
        response = api_response(200, {"movie_title": "千と千尋の神隠し"})

        assert "千と千尋の神隠し" in response["body"]


class TestSystemClock:
    def test_now_is_utc(self):
        assert SystemClock().now().tzinfo == timezone.utc
