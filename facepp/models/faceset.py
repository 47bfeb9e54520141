"""Response models for FaceSet (face collection) management."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from facepp.models.face import FaceResponse
from facepp.models.responses import FaceSetReference


class FailureDetail(BaseModel):
    """A face token that could not be added, with reason ``INVALID_FACE_TOKEN`` or ``QUOTA_EXCEEDED``."""

    reason: str = ""
    face_token: str = ""


class FaceSetBaseResponse(FaceResponse):
    faceset_token: str = ""
    outer_id: str = ""
    face_count: int = 0
    failure_detail: List[FailureDetail] = Field(default_factory=list)


class FaceSetCreateResponse(FaceSetBaseResponse):
    face_added: int = 0


class FaceSetAddFaceResponse(FaceSetCreateResponse):
    pass


class FaceSetRemoveFaceResponse(FaceSetBaseResponse):
    face_removed: int = 0


class FaceSetUpdateResponse(FaceResponse):
    faceset_token: str = ""
    outer_id: str = ""


class FaceSetDetailResponse(FaceResponse):
    """Full description of a collection; ``next`` is the cursor for the following page of tokens."""

    faceset_token: str = ""
    outer_id: str = ""
    display_name: str = ""
    user_data: str = ""
    tags: str = ""
    face_count: int = 0
    face_tokens: List[str] = Field(default_factory=list)
    next: str = ""


class FaceSetDeleteResponse(FaceResponse):
    faceset_token: str = ""
    outer_id: str = ""


class FaceSetSummary(FaceSetReference):
    pass


class FaceSetListResponse(FaceResponse):
    facesets: List[FaceSetSummary] = Field(default_factory=list)
    next: str = ""
