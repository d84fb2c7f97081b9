from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

import requests
from requests import Response


class ProviderError(RuntimeError):
    """Base provider error."""


class UpstreamDataError(ProviderError):
    """Raised when a provider payload is missing required data."""


@dataclass
class RequestConfig:
    timeout: float = 8.0


class HttpProvider:
    """Base class that adds timeouts and error translation for HTTP providers.

    Requests are issued exactly once; failures surface as :class:`ProviderError`.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._testing_mode = os.environ.get("TESTING_MODE", "0") == "1"
        self._log = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")

    def _handle_response(self, response: Response) -> Response:
        if response.status_code >= 400:
            self._log.error("Provider returned %s: %s", response.status_code, response.text[:200])
            raise ProviderError(f"HTTP {response.status_code}")
        return response

    def _request(self, method: str, url: str, **kwargs: Any) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise ProviderError("timeout") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise ProviderError("request failed") from exc
        self._log_response(response)
        return self._handle_response(response)

    def _json(self, response: Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise ProviderError("invalid json") from exc

    def _log_response(self, response: Response) -> None:
        if not self._testing_mode:
            return
        self._log.info(
            "Provider response %s %s: %s", response.status_code, response.url, response.text[:500]
        )


__all__ = ["HttpProvider", "ProviderError", "UpstreamDataError", "RequestConfig"]
