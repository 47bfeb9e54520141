"""Response models for detect, compare, search and face analysis."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from facepp.models.face import Face, FaceResponse


class DetectFaceResponse(FaceResponse):
    image_id: str = ""
    faces: List[Face] = Field(default_factory=list)


class CompareFaceResponse(FaceResponse):
    """Similarity of two faces plus reference thresholds keyed by false-accept rate."""

    confidence: float = 0.0
    thresholds: Dict[str, float] = Field(default_factory=dict)
    image_id1: str = ""
    image_id2: str = ""
    faces1: List[Face] = Field(default_factory=list)
    faces2: List[Face] = Field(default_factory=list)


class SearchResult(BaseModel):
    face_token: str = ""
    confidence: float = 0.0
    user_id: str = ""


class SearchFaceResponse(FaceResponse):
    results: List[SearchResult] = Field(default_factory=list)
    thresholds: Dict[str, float] = Field(default_factory=dict)
    image_id: str = ""
    faces: List[Face] = Field(default_factory=list)

    @field_validator("results")
    @classmethod
    def _rank_results(cls, value: List[SearchResult]) -> List[SearchResult]:
        return sorted(value, key=lambda result: result.confidence, reverse=True)


class FaceAnalyzeResponse(FaceResponse):
    faces: List[Face] = Field(default_factory=list)


class FaceSetReference(BaseModel):
    faceset_token: str = ""
    outer_id: str = ""
    display_name: str = ""
    tags: str = ""


class FaceDetailResponse(FaceResponse):
    """Details of one face token, including the collections it belongs to."""

    face_token: str = ""
    user_id: str = ""
    facesets: List[FaceSetReference] = Field(default_factory=list)


class FaceSetUserIdResponse(FaceResponse):
    face_token: str = ""
    user_id: Optional[str] = None
