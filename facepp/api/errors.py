"""Exceptions raised by the SDK and classification of Face++ error responses."""

from __future__ import annotations

from pydantic import ValidationError

from facepp.models.face import FaceResponse

CONCURRENCY_LIMIT_EXCEEDED = "CONCURRENCY_LIMIT_EXCEEDED"
COEXISTENCE_ARGUMENTS = "COEXISTENCE_ARGUMENTS"
MISSING_ARGUMENTS = "MISSING_ARGUMENTS"
DENIED_BY_CLIENT = "Denied by Client"
DENIED_BY_ADMIN = "Denied by Admin"

BODY_PARSE_FAILURE = "body parse failure"


class FaceSDKError(RuntimeError):
    """Base class for every error raised by the SDK."""


class FaceConfigurationError(FaceSDKError):
    """Raised when the SDK or a request builder is used incorrectly."""


class FaceRequestError(FaceSDKError):
    """Raised when the HTTP round trip itself fails (network, DNS, timeout)."""


class FaceDecodeError(FaceSDKError):
    """Raised when a 200 response body cannot be decoded into the response model."""

    def __init__(self, message: str, body: str = "") -> None:
        self.body = body
        super().__init__(message)


class FaceAPIError(FaceSDKError):
    """Raised when Face++ answers with a non-200 status code.

    ``error_message`` carries the raw token returned by the service (for example
    ``MISSING_ARGUMENTS:api_key``) and ``message`` its human-readable meaning.
    """

    def __init__(self, code: int, error_message: str = "", message: str = "") -> None:
        self.code = code
        self.error_message = error_message
        self.message = message
        super().__init__(f"code:{code},error:{error_message},message:{message}")


def _split_token(token: str) -> list[str]:
    return token.split(":")


def _forbidden_message(token: str) -> str:
    if token == CONCURRENCY_LIMIT_EXCEEDED:
        return "concurrency limit exceeded for this api_key"
    parts = _split_token(token)
    if len(parts) != 2:
        return "api_key has no permission to call this API"
    if parts[1] == DENIED_BY_CLIENT:
        return "api_key calls were denied by the key owner"
    if parts[1] == DENIED_BY_ADMIN:
        return "api_key calls were denied by an administrator"
    return "api_key calls were denied due to insufficient account balance"


def _bad_request_message(token: str) -> str:
    if token == COEXISTENCE_ARGUMENTS:
        return "mutually exclusive arguments were supplied together"
    parts = _split_token(token)
    if len(parts) != 2:
        return "bad request"
    if parts[0] == MISSING_ARGUMENTS:
        return f"missing required argument: {parts[1]}"
    return f"argument parse error: {parts[1]}"


def classify_error(status_code: int, body: str) -> FaceAPIError:
    """Translate a non-200 response into a :class:`FaceAPIError`.

    A 413 body is plain text and is never parsed. For every other status the body
    is read as the response envelope; when that fails the raw body is attached
    to ``error_message`` and the message is still resolved from the status code.
    """

    token = ""
    error_message = ""
    if status_code != 413:
        try:
            envelope = FaceResponse.model_validate_json(body)
        except ValidationError:
            error_message = f"{BODY_PARSE_FAILURE}: {body}"
        else:
            token = envelope.error_message or ""
            error_message = token

    if status_code == 401:
        message = "api_key and api_secret do not match"
    elif status_code == 403:
        message = _forbidden_message(token)
    elif status_code == 400:
        message = _bad_request_message(token)
    elif status_code == 413:
        message = "request body exceeds the 2MB size limit"
    elif status_code == 404:
        message = "the requested API does not exist"
    elif status_code == 500:
        message = "internal server error; retry the request and contact support if it persists"
    else:
        message = "unknown error"
    return FaceAPIError(status_code, error_message, message)
