"""HTTP client for the remote skin analysis service."""

import logging
import time
from typing import Optional

import requests

from core.errors import MalformedResponse, RemoteRejection, TransportFailure
from core.response_schema import extract_error_message, parse_analysis_result
from core.utils import AnalysisResult, ClientConfig, SelectedImage
from i18n import t

logger = logging.getLogger(__name__)


class AnalysisClient:
    """Submits one image per call to ``POST {base_url}/analyze``.

    Every outcome other than a validated AnalysisResult is raised as an
    AnalysisError subclass. There is no retry.
    """

    def __init__(self, config: Optional[ClientConfig] = None, session: Optional[requests.Session] = None):
        self._config = config or ClientConfig.from_env()
        self._session = session or requests.Session()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def analyze(self, image: SelectedImage) -> AnalysisResult:
        """Upload the image as the multipart part ``image`` and parse the reply."""
        url = self._config.analyze_url
        files = {"image": (image.name, image.data, image.media_type)}

        start_ts = time.monotonic()
        try:
            response = self._session.post(url, files=files, timeout=self._config.timeout_s)
        except requests.exceptions.RequestException as e:
            logger.warning("POST %s failed without a response: %s", url, e)
            raise TransportFailure(t("errors.generic"), detail=str(e)) from e
        elapsed_ms = (time.monotonic() - start_ts) * 1000

        logger.info(
            "POST %s -> %s (%.1f ms, %d bytes uploaded)",
            url, response.status_code, elapsed_ms, image.size_bytes,
        )

        if not 200 <= response.status_code < 300:
            raise self._rejection(response)

        try:
            body = response.json()
        except ValueError as e:
            raise MalformedResponse(
                t("errors.malformed_response"),
                detail=f"response body is not JSON: {e}",
                status_code=response.status_code,
            ) from e

        return parse_analysis_result(body)

    def close(self):
        self._session.close()

    @staticmethod
    def _rejection(response: requests.Response) -> RemoteRejection:
        try:
            body = response.json()
        except ValueError:
            body = None
        message = extract_error_message(body)
        if message is None:
            logger.warning("Unreadable error body for HTTP %s: %r", response.status_code, response.text[:200])
            message = t("errors.request_failed")
        return RemoteRejection(message, status_code=response.status_code)
