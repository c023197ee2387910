"""Tests for core.analysis_client module."""

import pytest
import requests

from core.analysis_client import AnalysisClient
from core.errors import AnalysisError, MalformedResponse, RemoteRejection, TransportFailure
from core.utils import ClientConfig
from helpers import make_response


@pytest.fixture
def client(session):
    return AnalysisClient(ClientConfig(base_url="http://analysis.test:3001/", timeout_s=5), session=session)


class TestRequest:
    def test_multipart_post(self, client, session, jpeg_image, eczema_body):
        session.post.return_value = make_response(200, eczema_body)
        client.analyze(jpeg_image)

        session.post.assert_called_once_with(
            "http://analysis.test:3001/analyze",
            files={"image": ("arm.jpg", jpeg_image.data, "image/jpeg")},
            timeout=5,
        )

    def test_one_call_per_analyze(self, client, session, jpeg_image):
        session.post.return_value = make_response(500, {"error": "model unavailable"})
        with pytest.raises(RemoteRejection):
            client.analyze(jpeg_image)
        assert session.post.call_count == 1

    def test_close_closes_session(self, client, session):
        client.close()
        session.close.assert_called_once()


class TestSuccess:
    def test_parsed_result(self, client, session, jpeg_image, eczema_body, eczema_result):
        session.post.return_value = make_response(200, eczema_body)
        assert client.analyze(jpeg_image) == eczema_result

    def test_any_2xx_accepted(self, client, session, jpeg_image, eczema_body, eczema_result):
        session.post.return_value = make_response(201, eczema_body)
        assert client.analyze(jpeg_image) == eczema_result

    def test_non_json_body(self, client, session, jpeg_image):
        session.post.return_value = make_response(200, text="<html>ok</html>")
        with pytest.raises(MalformedResponse) as exc_info:
            client.analyze(jpeg_image)
        assert exc_info.value.status_code == 200

    def test_out_of_range_confidence(self, client, session, jpeg_image, eczema_body):
        session.post.return_value = make_response(200, dict(eczema_body, confidence=120))
        with pytest.raises(MalformedResponse):
            client.analyze(jpeg_image)


class TestRejection:
    def test_error_field(self, client, session, jpeg_image):
        session.post.return_value = make_response(500, {"error": "model unavailable"})
        with pytest.raises(RemoteRejection) as exc_info:
            client.analyze(jpeg_image)
        assert exc_info.value.user_message == "model unavailable"
        assert exc_info.value.status_code == 500

    def test_message_preferred(self, client, session, jpeg_image):
        session.post.return_value = make_response(
            400, {"message": "Image too blurry", "error": "Bad Request"}
        )
        with pytest.raises(RemoteRejection) as exc_info:
            client.analyze(jpeg_image)
        assert exc_info.value.user_message == "Image too blurry"

    def test_unparseable_body(self, client, session, jpeg_image):
        session.post.return_value = make_response(502, text="Bad Gateway")
        with pytest.raises(RemoteRejection) as exc_info:
            client.analyze(jpeg_image)
        assert exc_info.value.user_message == "Failed to analyze image"

    def test_body_without_message(self, client, session, jpeg_image):
        session.post.return_value = make_response(404, {"status": 404})
        with pytest.raises(RemoteRejection) as exc_info:
            client.analyze(jpeg_image)
        assert exc_info.value.user_message == "Failed to analyze image"


class TestTransport:
    @pytest.mark.parametrize("exc", [
        requests.exceptions.ConnectionError("connection refused"),
        requests.exceptions.Timeout("read timed out"),
    ])
    def test_no_response(self, client, session, jpeg_image, exc):
        session.post.side_effect = exc
        with pytest.raises(TransportFailure) as exc_info:
            client.analyze(jpeg_image)
        assert exc_info.value.user_message == "Failed to analyze image. Please try again."
        assert isinstance(exc_info.value, AnalysisError)


class TestClientConfig:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SKINEVAL_API_URL", raising=False)
        monkeypatch.delenv("SKINEVAL_API_TIMEOUT", raising=False)
        config = ClientConfig.from_env()
        assert config.base_url == "http://localhost:3001"
        assert config.analyze_url == "http://localhost:3001/analyze"
        assert config.timeout_s == 60.0

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("SKINEVAL_API_URL", "https://skin.example.org/api/")
        monkeypatch.setenv("SKINEVAL_API_TIMEOUT", "12.5")
        config = ClientConfig.from_env()
        assert config.analyze_url == "https://skin.example.org/api/analyze"
        assert config.timeout_s == 12.5

    @pytest.mark.parametrize("raw", ["soon", "0", "-3"])
    def test_bad_timeout_uses_default(self, monkeypatch, raw):
        monkeypatch.setenv("SKINEVAL_API_TIMEOUT", raw)
        assert ClientConfig.from_env().timeout_s == 60.0
