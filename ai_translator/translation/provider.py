"""Translation provider clients."""

import os
import time
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests

from .exceptions import ProviderError


logger = logging.getLogger(__name__)


DEFAULT_BASE_URL = "https://sharpapi.com/api/v1"


@dataclass(frozen=True)
class JobHandle:
    """Reference to a translation job submitted to the provider."""

    job_id: str
    status_url: str


@dataclass(frozen=True)
class TranslatedContent:
    """Result of a finished translation job."""

    content: str
    raw: Dict[str, Any] = field(default_factory=dict, compare=False)


class TranslationProvider(ABC):
    """Abstract base class for translation providers."""

    @abstractmethod
    def submit(self, text: str, target_language: str, tone: str, context: str) -> JobHandle:
        """
        Submit text for translation.

        Args:
            text: Source text
            target_language: Display name of the target language (e.g. "French")
            tone: Voice tone value
            context: Free-text hint, e.g. "Source language is English"

        Returns:
            Handle of the submitted job
        """

    @abstractmethod
    def fetch_result(self, handle: JobHandle, timeout: Optional[float] = None) -> TranslatedContent:
        """Block until the job finishes and return its content."""

    def is_configured(self) -> bool:
        """Whether the provider has the credential it needs."""
        return True

    def translate(
        self,
        text: str,
        target_language: str,
        tone: str,
        context: str,
        timeout: Optional[float] = None
    ) -> str:
        """Submit a job and wait for it at once, returning the translated text."""
        handle = self.submit(text, target_language, tone, context)
        return self.fetch_result(handle, timeout=timeout).content or ""


class SharpApiProvider(TranslationProvider):
    """Client for the SharpAPI content translation endpoint."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        poll_interval: float = 5.0,
        max_wait: float = 180.0,
        request_timeout: float = 30.0
    ):
        """
        Initialize provider.

        Args:
            api_key: SharpAPI key (defaults to env var SHARP_API_KEY)
            base_url: API base URL
            poll_interval: Seconds between status polls when the API sends no Retry-After
            max_wait: Maximum seconds to wait for one job
            request_timeout: Timeout for a single HTTP request
        """
        self.api_key = api_key or os.getenv("SHARP_API_KEY")
        self.base_url = base_url.rstrip("/")
        self.poll_interval = poll_interval
        self.max_wait = max_wait
        self.request_timeout = request_timeout

    def is_configured(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/json",
            "Content-Type": "application/json"
        }

    def submit(self, text: str, target_language: str, tone: str, context: str) -> JobHandle:
        url = f"{self.base_url}/content/translate"
        payload = {
            "content": text,
            "language": target_language,
            "voice_tone": tone,
            "context": context
        }

        logger.info(f"Submitting translation to {target_language} (first 100 chars): {text[:100]}")
        data = self._request("POST", url, json=payload)

        status_url = data.get("status_url")
        job_id = data.get("job_id") or ""
        if not status_url:
            raise ProviderError(f"SharpAPI response has no status_url: {data}")

        return JobHandle(job_id=str(job_id), status_url=status_url)

    def fetch_result(self, handle: JobHandle, timeout: Optional[float] = None) -> TranslatedContent:
        wait_limit = self.max_wait if timeout is None else min(self.max_wait, timeout)
        deadline = time.monotonic() + wait_limit

        while True:
            response = self._send("GET", handle.status_url)
            data = self._decode(response)

            attributes = data.get("data", {}).get("attributes", {})
            status = attributes.get("status")

            if status == "success":
                result = attributes.get("result") or {}
                logger.debug(f"Job {handle.job_id} finished")
                return TranslatedContent(content=result.get("content") or "", raw=data)

            if status == "failed":
                raise ProviderError(f"SharpAPI job {handle.job_id} failed: {attributes.get('result')}")

            delay = self._retry_after(response)
            if time.monotonic() + delay > deadline:
                raise ProviderError(
                    f"SharpAPI job {handle.job_id} did not finish within {wait_limit:.0f} seconds"
                )

            logger.debug(f"Job {handle.job_id} status {status!r}, polling again in {delay}s")
            time.sleep(delay)

    def _retry_after(self, response: requests.Response) -> float:
        value = response.headers.get("Retry-After")
        try:
            return max(float(value), 0.0) if value is not None else self.poll_interval
        except ValueError:
            return self.poll_interval

    def _request(self, method: str, url: str, **kwargs) -> Dict[str, Any]:
        return self._decode(self._send(method, url, **kwargs))

    def _send(self, method: str, url: str, **kwargs) -> requests.Response:
        """Send an HTTP request, turning every failure into ProviderError."""
        try:
            response = requests.request(
                method, url, headers=self._headers(), timeout=self.request_timeout, **kwargs
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            error_detail = e.response.text if e.response is not None else ""
            status_code = e.response.status_code if e.response is not None else "?"
            raise ProviderError(
                f"SharpAPI error (status {status_code}): {error_detail}\n"
                f"Please check your API key and quota."
            ) from e
        except requests.exceptions.RequestException as e:
            raise ProviderError(f"Network error calling SharpAPI: {e}") from e

        return response

    @staticmethod
    def _decode(response: requests.Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            raise ProviderError(f"Invalid JSON from SharpAPI: {response.text[:200]}") from e

        if not isinstance(data, dict):
            raise ProviderError(f"Unexpected SharpAPI response: {data!r}")
        if "error" in data or "errors" in data:
            raise ProviderError(f"SharpAPI rejected the request: {data.get('error') or data.get('errors')}")

        return data


def create_provider(config: Dict[str, Any]) -> TranslationProvider:
    """Build the provider named in the configuration."""
    name = config.get("provider", "sharpapi")

    if name == "sharpapi":
        return SharpApiProvider(
            api_key=config.get("api_key"),
            base_url=config.get("base_url", DEFAULT_BASE_URL),
            poll_interval=config.get("poll_interval", 5.0),
            max_wait=config.get("max_wait", 180.0),
            request_timeout=config.get("request_timeout", 30.0)
        )

    raise ValueError(f"Unsupported provider: {name}")
