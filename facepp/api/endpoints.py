"""Capability-specific request builders for detect, compare, search, FaceSet and face APIs."""

from __future__ import annotations

from typing import Any, Sequence

from facepp.api.request import (
    COMPARE,
    DETECT,
    FACE_ANALYZE,
    FACE_GET_DETAIL,
    FACE_SET_USER_ID,
    FACESET_ADD_FACE,
    FACESET_CREATE,
    FACESET_DELETE,
    FACESET_GET_DETAIL,
    FACESET_LIST,
    FACESET_REMOVE_FACE,
    FACESET_UPDATE,
    SEARCH,
    FaceRequest,
    require_kind,
)
from facepp.models import (
    CompareFaceResponse,
    DetectFaceResponse,
    FaceResponse,
    SearchFaceResponse,
)

IMAGE_KINDS = frozenset({"image_url", "image_file", "image_base64"})
FACE_KINDS = IMAGE_KINDS | {"face_token"}
FACE1_KINDS = frozenset({"face_token1", "image_url1", "image_file1", "image_base64_1"})
FACE2_KINDS = frozenset({"face_token2", "image_url2", "image_file2", "image_base64_2"})
FACESET_KINDS = frozenset({"faceset_token", "outer_id"})

MAX_ANALYZE_FACE_TOKENS = 5
MAX_SEARCH_RESULTS = 5


class DetectRequest(FaceRequest[DetectFaceResponse]):
    """Detect faces in one image and optionally analyse them."""

    def set_image(self, image: Any, kind: str = "image_file") -> "DetectRequest":
        require_kind(kind, IMAGE_KINDS)
        self.set_option(kind, image)
        return self

    def set_return_attributes(self, *attributes: str) -> "DetectRequest":
        self.set_option("return_attributes", ",".join(attributes) or "none")
        return self

    def set_return_landmark(self, level: int) -> "DetectRequest":
        """0 for no landmarks, 1 for 83 points, 2 for 106 points."""

        self.set_option("return_landmark", level)
        return self


class CompareRequest(FaceRequest[CompareFaceResponse]):
    def set_face1(self, face: Any, kind: str = "image_file1") -> "CompareRequest":
        require_kind(kind, FACE1_KINDS)
        self.set_option(kind, face)
        return self

    def set_face2(self, face: Any, kind: str = "image_file2") -> "CompareRequest":
        require_kind(kind, FACE2_KINDS)
        self.set_option(kind, face)
        return self


class SearchRequest(FaceRequest[SearchFaceResponse]):
    """Find the faces of a FaceSet most similar to a probe face."""

    def set_face(self, face: Any, kind: str = "image_file") -> "SearchRequest":
        require_kind(kind, FACE_KINDS)
        self.set_option(kind, face)
        return self

    def set_faceset(self, faceset: str, kind: str = "faceset_token") -> "SearchRequest":
        require_kind(kind, FACESET_KINDS)
        self.set_option(kind, faceset)
        return self

    def set_return_result_count(self, count: int) -> "SearchRequest":
        if not 1 <= count <= MAX_SEARCH_RESULTS:
            raise ValueError(f"return_result_count must be between 1 and {MAX_SEARCH_RESULTS}.")
        self.set_option("return_result_count", count)
        return self


class FaceSetRequest(FaceRequest[FaceResponse]):
    """FaceSet management; pick exactly one operation before calling ``end()``."""

    def create(self) -> "FaceSetRequest":
        self._select(FACESET_CREATE)
        return self

    def add_face(self) -> "FaceSetRequest":
        self._select(FACESET_ADD_FACE)
        return self

    def remove_face(self) -> "FaceSetRequest":
        self._select(FACESET_REMOVE_FACE)
        return self

    def update(self) -> "FaceSetRequest":
        self._select(FACESET_UPDATE)
        return self

    def get_detail(self) -> "FaceSetRequest":
        self._select(FACESET_GET_DETAIL)
        return self

    def delete(self) -> "FaceSetRequest":
        self._select(FACESET_DELETE)
        return self

    def get_facesets(self) -> "FaceSetRequest":
        self._select(FACESET_LIST)
        return self

    def set_faceset(self, faceset: str, kind: str = "faceset_token") -> "FaceSetRequest":
        require_kind(kind, FACESET_KINDS)
        self.set_option(kind, faceset)
        return self

    def set_face_tokens(self, face_tokens: Sequence[str]) -> "FaceSetRequest":
        self.set_option("face_tokens", list(face_tokens))
        return self


class FaceAPIRequest(FaceRequest[FaceResponse]):
    """Operations on face tokens returned by a previous detect call."""

    def analyze(self) -> "FaceAPIRequest":
        self._select(FACE_ANALYZE)
        return self

    def get_detail(self) -> "FaceAPIRequest":
        self._select(FACE_GET_DETAIL)
        return self

    def set_user_id(self, user_id: str) -> "FaceAPIRequest":
        self._select(FACE_SET_USER_ID)
        self.set_option("user_id", user_id)
        return self

    def set_face_token(self, face_token: str) -> "FaceAPIRequest":
        self.set_option("face_token", face_token)
        return self

    def set_face_tokens(self, face_tokens: Sequence[str]) -> "FaceAPIRequest":
        tokens = list(face_tokens)
        _check_analyze_batch(tokens)
        self.set_option("face_tokens", tokens)
        return self

    def set_return_attributes(self, *attributes: str) -> "FaceAPIRequest":
        self.set_option("return_attributes", ",".join(attributes) or "none")
        return self

    def set_return_landmark(self, level: int) -> "FaceAPIRequest":
        self.set_option("return_landmark", level)
        return self

    def end(self) -> FaceResponse:
        if self.endpoint is FACE_ANALYZE:
            tokens = str(self._fields.get("face_tokens", ""))
            _check_analyze_batch([token for token in tokens.split(",") if token])
        return super().end()


def _check_analyze_batch(tokens: Sequence[str]) -> None:
    if len(tokens) > MAX_ANALYZE_FACE_TOKENS:
        raise ValueError(
            f"At most {MAX_ANALYZE_FACE_TOKENS} face tokens can be analysed per call, got {len(tokens)}.",
        )
