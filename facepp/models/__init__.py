"""Typed response models for the Face++ API."""

from .face import Attributes, Face, FaceRectangle, FaceResponse, Landmark
from .faceset import (
    FaceSetAddFaceResponse,
    FaceSetCreateResponse,
    FaceSetDeleteResponse,
    FaceSetDetailResponse,
    FaceSetListResponse,
    FaceSetRemoveFaceResponse,
    FaceSetSummary,
    FaceSetUpdateResponse,
    FailureDetail,
)
from .responses import (
    CompareFaceResponse,
    DetectFaceResponse,
    FaceAnalyzeResponse,
    FaceDetailResponse,
    FaceSetReference,
    FaceSetUserIdResponse,
    SearchFaceResponse,
    SearchResult,
)

__all__ = [
    "Attributes",
    "CompareFaceResponse",
    "DetectFaceResponse",
    "Face",
    "FaceAnalyzeResponse",
    "FaceDetailResponse",
    "FaceRectangle",
    "FaceResponse",
    "FaceSetAddFaceResponse",
    "FaceSetCreateResponse",
    "FaceSetDeleteResponse",
    "FaceSetDetailResponse",
    "FaceSetListResponse",
    "FaceSetReference",
    "FaceSetRemoveFaceResponse",
    "FaceSetSummary",
    "FaceSetUpdateResponse",
    "FaceSetUserIdResponse",
    "FailureDetail",
    "Landmark",
    "SearchFaceResponse",
    "SearchResult",
]
