"""Shared response envelope and per-face structures returned by Face++."""

from __future__ import annotations

from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]


class FaceResponse(BaseModel):
    """Fields present on every Face++ response."""

    model_config = ConfigDict(extra="ignore")

    request_id: str = ""
    time_used: int = 0
    error_message: Optional[str] = None


class FaceRectangle(BaseModel):
    top: int = 0
    left: int = 0
    width: int = 0
    height: int = 0


class Landmark(BaseModel):
    x: Number = 0
    y: Number = 0


class ValueAttribute(BaseModel):
    value: Union[str, Number, None] = None


class ScoredAttribute(BaseModel):
    """A [0,100] score with the service threshold above which it counts as present."""

    value: float = 0.0
    threshold: float = 0.0


class HeadPose(BaseModel):
    pitch_angle: float = 0.0
    roll_angle: float = 0.0
    yaw_angle: float = 0.0


class EyeStatus(BaseModel):
    left_eye_status: Dict[str, float] = {}
    right_eye_status: Dict[str, float] = {}


class Beauty(BaseModel):
    male_score: float = 0.0
    female_score: float = 0.0


class EyeGaze(BaseModel):
    left_eye_gaze: Dict[str, float] = {}
    right_eye_gaze: Dict[str, float] = {}


class Blur(BaseModel):
    blurness: Optional[ScoredAttribute] = None
    motionblur: Optional[ScoredAttribute] = None
    gaussianblur: Optional[ScoredAttribute] = None


class Attributes(BaseModel):
    """Optional analysis results, populated only for the requested ``return_attributes``."""

    gender: Optional[ValueAttribute] = None
    age: Optional[ValueAttribute] = None
    smile: Optional[ScoredAttribute] = None
    headpose: Optional[HeadPose] = None
    blur: Optional[Blur] = None
    eyestatus: Optional[EyeStatus] = None
    emotion: Optional[Dict[str, float]] = None
    facequality: Optional[ScoredAttribute] = None
    ethnicity: Optional[ValueAttribute] = None
    beauty: Optional[Beauty] = None
    mouthstatus: Optional[Dict[str, float]] = None
    eyegaze: Optional[EyeGaze] = None
    skinstatus: Optional[Dict[str, float]] = None


class Face(BaseModel):
    """A single detected face."""

    face_token: str = ""
    face_rectangle: FaceRectangle = Field(default_factory=FaceRectangle)
    landmark: Optional[Dict[str, Landmark]] = None
    attributes: Optional[Attributes] = None
