# app/sentiment/service.py
import logging
from typing import Any, Dict, Optional

import httpx

from app.shared.config import settings
from app.shared.http import ApiError
from . import client

logger = logging.getLogger(__name__)

ANALYZE_TIMEOUT = 10.0
HEALTH_TIMEOUT = 5.0


class InvalidInput(ApiError):
    code = "invalid_input"
    status = 400

class UpstreamError(ApiError):
    code = "upstream_error"
    status = 500

class ServiceUnavailable(ApiError):
    code = "service_unavailable"
    status = 503

class AnalysisFailed(ApiError):
    code = "analysis_failed"
    status = 500

class ServiceUnhealthy(ApiError):
    code = "service_unhealthy"
    status = 503


class SentimentService:
    """Proxy to the Python sentiment API; normalizes its answers into ApiError subclasses."""

    def __init__(self, base_url: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._base_url = (base_url or settings.PYTHON_API_URL).rstrip("/")
        self._transport = transport
        logger.info("Python API URL: %s", self._base_url)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def analyze(self, text: Optional[str]) -> Dict[str, Any]:
        if not text or not text.strip():
            raise InvalidInput("Text cannot be empty")

        logger.debug('Sending sentiment analysis request for text: "%s..."', text[:50])
        res = await client.request(
            "POST",
            f"{self._base_url}/analyze",
            json={"text": text},
            headers={"Content-Type": "application/json"},
            timeout=ANALYZE_TIMEOUT,
            transport=self._transport,
        )

        if res.ok:
            score = res.body.get("sentiment") if isinstance(res.body, dict) else None
            logger.debug("Received sentiment score: %s", score)
            return res.body

        logger.error("Failed to analyze sentiment: %s", res.message)
        if res.kind == "error_body":
            detail = res.body.get("detail") if isinstance(res.body, dict) else None
            raise UpstreamError(f"Python API error: {detail or 'Unknown error'}", status=res.status or 500)
        if res.kind == "connection_refused":
            raise ServiceUnavailable("Python sentiment service is unavailable")
        raise AnalysisFailed(f"Failed to analyze sentiment: {res.message}", status=res.status or 500)

    async def check_health(self) -> Dict[str, Any]:
        res = await client.request(
            "GET",
            f"{self._base_url}/health",
            timeout=HEALTH_TIMEOUT,
            transport=self._transport,
        )
        if not res.ok:
            # every failure shape collapses to one signal here
            logger.warning("Python API health check failed: %s", res.message)
            raise ServiceUnhealthy("Python sentiment service is unhealthy")
        return res.body


_service: Optional[SentimentService] = None

def get_sentiment_service() -> SentimentService:
    """FastAPI dependency; one proxy per process, built on first use."""
    global _service
    if _service is None:
        _service = SentimentService()
    return _service
