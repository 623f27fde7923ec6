from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests
from requests import Response


class ForecastError(RuntimeError):
    """Base error for a failed forecast fetch."""


class TransportError(ForecastError):
    """Raised when the request could not be sent or no response arrived."""


class StatusError(ForecastError):
    """Raised when the API answers with anything other than 200."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"API request failed with status code: {status_code}")
        self.status_code = status_code


class BodyReadError(ForecastError):
    """Raised when the response body could not be read in full."""


class DecodeError(ForecastError):
    """Raised when the body is not the expected JSON document."""


@dataclass
class RequestConfig:
    timeout: float = 5.0


class ForecastProvider:
    """Base class for HTTP forecast sources: one GET, bounded timeout, no retries."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    def _handle_response(self, response: Response) -> Response:
        if response.status_code != 200:
            self._log.error("Provider returned %s %s for %s", response.status_code, response.reason, response.url)
            raise StatusError(response.status_code)
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                stream=True,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request timed out after %ss", self.request_config.timeout)
            raise TransportError(f"error making request: timed out after {self.request_config.timeout}s") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise TransportError(f"error making request: {exc}") from exc
        with response:
            self._handle_response(response)
            self._read_body(response)
        return response

    def _read_body(self, response: Response) -> bytes:
        try:
            return response.content
        except requests.RequestException as exc:
            self._log.error("Failed to read response body", exc_info=exc)
            raise BodyReadError(f"error reading response body: {exc}") from exc


__all__ = [
    "BodyReadError",
    "DecodeError",
    "ForecastError",
    "ForecastProvider",
    "RequestConfig",
    "StatusError",
    "TransportError",
]
