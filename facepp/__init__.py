"""Python client for the Face++ facial recognition API."""

from .api.client import FaceSDK
from .api.errors import (
    FaceAPIError,
    FaceConfigurationError,
    FaceDecodeError,
    FaceRequestError,
    FaceSDKError,
    classify_error,
)
from .api.fields import FilePayload
from .config.settings import CN_BASE_URL, US_BASE_URL, ClientSettings

__all__ = [
    "CN_BASE_URL",
    "ClientSettings",
    "FaceAPIError",
    "FaceConfigurationError",
    "FaceDecodeError",
    "FaceRequestError",
    "FaceSDK",
    "FaceSDKError",
    "FilePayload",
    "US_BASE_URL",
    "classify_error",
]
