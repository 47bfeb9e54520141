"""Synchronous client for the Face++ v3 API."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

import httpx
from pydantic import ValidationError

from facepp.api.endpoints import (
    CompareRequest,
    DetectRequest,
    FaceAPIRequest,
    FaceSetRequest,
    SearchRequest,
)
from facepp.api.errors import (
    FaceConfigurationError,
    FaceDecodeError,
    FaceRequestError,
    classify_error,
)
from facepp.api.fields import FieldValue, FilePayload
from facepp.api.request import COMPARE, DETECT, SEARCH, Endpoint, ResponseT
from facepp.config.settings import ClientSettings, get_default_settings

logger = logging.getLogger(__name__)

MultipartPart = Tuple[str, Tuple[Optional[str], Any, Optional[str]]]


class FaceSDK:
    """Holds API credentials and hands out request builders for each capability."""

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        debug: bool = False,
        *,
        settings: ClientSettings | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        if not api_key or not api_secret:
            raise FaceConfigurationError("API key and API secret must not be empty.")
        self._api_key = api_key
        self._api_secret = api_secret
        self._settings = settings or get_default_settings()
        self.debug = debug or self._settings.debug
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=self._settings.timeout)

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    def url_for(self, endpoint: Endpoint[Any]) -> str:
        """Absolute URL of ``endpoint`` under the configured base URL."""

        return f"{self._settings.base_url.rstrip('/')}{endpoint.path}"

    def credentials(self) -> Dict[str, str]:
        return {"api_key": self._api_key, "api_secret": self._api_secret}

    def close(self) -> None:
        """Close the underlying HTTP client if the SDK created it."""

        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "FaceSDK":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def detect(self, options: Mapping[str, Any] | None = None) -> DetectRequest:
        return DetectRequest(self, DETECT, options)

    def compare(self, options: Mapping[str, Any] | None = None) -> CompareRequest:
        return CompareRequest(self, COMPARE, options)

    def search(self, options: Mapping[str, Any] | None = None) -> SearchRequest:
        return SearchRequest(self, SEARCH, options)

    def faceset(self, options: Mapping[str, Any] | None = None) -> FaceSetRequest:
        return FaceSetRequest(self, None, options)

    def face(self, options: Mapping[str, Any] | None = None) -> FaceAPIRequest:
        return FaceAPIRequest(self, None, options)

    def call(
        self,
        endpoint: Endpoint[ResponseT],
        fields: Mapping[str, FieldValue],
        files: Mapping[str, FilePayload] | None = None,
    ) -> ResponseT:
        """POST one multipart request to ``endpoint`` and decode the JSON reply."""

        parts = self._multipart(fields, files or {})
        url = self.url_for(endpoint)
        if self.debug:
            logger.debug(
                "POST %s fields=%s files=%s",
                url,
                sorted(fields),
                sorted(files or {}),
            )
        try:
            response = self._client.post(url, files=parts)
        except httpx.HTTPError as exc:
            raise FaceRequestError(f"request failed: {exc}") from exc

        body = response.text
        if self.debug:
            logger.debug("%s responded %s: %s", endpoint.path, response.status_code, body)

        if response.status_code != httpx.codes.OK:
            error = classify_error(response.status_code, body)
            logger.warning("Face++ %s failed: %s", endpoint.name, error)
            raise error

        try:
            return endpoint.response_model.model_validate_json(body)
        except ValidationError as exc:
            logger.error("Malformed Face++ %s response body: %s", endpoint.name, body)
            raise FaceDecodeError(f"malformed response body from {endpoint.path}", body=body) from exc

    @staticmethod
    def _multipart(
        fields: Mapping[str, FieldValue],
        files: Mapping[str, FilePayload],
    ) -> List[MultipartPart]:
        parts: List[MultipartPart] = [
            (name, (None, str(value), None)) for name, value in fields.items()
        ]
        parts.extend(
            (name, (payload.filename, payload.content, payload.content_type))
            for name, payload in files.items()
        )
        return parts
