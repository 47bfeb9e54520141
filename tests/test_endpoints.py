"""Tests for FaceSet, search and face analysis endpoints."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from facepp import FaceSDK
from facepp.api.errors import FaceConfigurationError
from facepp.api.request import ENDPOINTS
from facepp.config.settings import CN_BASE_URL
from facepp.models import (
    FaceAnalyzeResponse,
    FaceDetailResponse,
    FaceSetAddFaceResponse,
    FaceSetCreateResponse,
    FaceSetDetailResponse,
    FaceSetListResponse,
    FaceSetRemoveFaceResponse,
    FaceSetUserIdResponse,
    SearchFaceResponse,
)


class _Recorder:
    """Mock transport handler returning a canned payload and remembering requests."""

    def __init__(self, payload: dict[str, Any]) -> None:
        self.payload = payload
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return httpx.Response(200, json={"request_id": "req-9", "time_used": 5, **self.payload})

    @property
    def path(self) -> str:
        return self.requests[-1].url.path

    @property
    def body(self) -> bytes:
        return self.requests[-1].content


def _sdk(recorder: _Recorder) -> FaceSDK:
    client = httpx.Client(base_url=CN_BASE_URL, transport=httpx.MockTransport(recorder))
    return FaceSDK("key", "secret", http_client=client)


def test_faceset_create_scenario() -> None:
    recorder = _Recorder({"faceset_token": "fs-1", "outer_id": "user1", "face_added": 0, "face_count": 0, "failure_detail": []})

    result = _sdk(recorder).faceset({"display_name": "user1", "outer_id": "user1"}).create().end()

    assert isinstance(result, FaceSetCreateResponse)
    assert result.faceset_token
    assert result.face_count == 0
    assert recorder.path == "/facepp/v3/faceset/create"
    assert b'name="display_name"' in recorder.body
    assert b'name="outer_id"' in recorder.body


def test_faceset_without_operation_cannot_be_sent() -> None:
    recorder = _Recorder({})

    with pytest.raises(FaceConfigurationError):
        _sdk(recorder).faceset().end()
    assert recorder.requests == []


@pytest.mark.parametrize(
    ("operation", "path"),
    [
        ("create", "/faceset/create"),
        ("add_face", "/faceset/addface"),
        ("remove_face", "/faceset/removeface"),
        ("update", "/faceset/update"),
        ("get_detail", "/faceset/getdetail"),
        ("delete", "/faceset/delete"),
        ("get_facesets", "/faceset/getfacesets"),
    ],
)
def test_faceset_operations_choose_path(operation: str, path: str) -> None:
    recorder = _Recorder({})
    request = _sdk(recorder).faceset().set_faceset("fs-1")

    getattr(request, operation)().end()

    assert recorder.path == "/facepp/v3" + path


def test_faceset_remove_face_counts_and_failures() -> None:
    recorder = _Recorder(
        {
            "faceset_token": "fs-1",
            "face_removed": 1,
            "face_count": 3,
            "failure_detail": [{"reason": "INVALID_FACE_TOKEN", "face_token": "bad"}],
        },
    )

    result = _sdk(recorder).faceset().remove_face().set_faceset("fs-1").set_face_tokens(["good", "bad"]).end()

    assert isinstance(result, FaceSetRemoveFaceResponse)
    assert result.face_removed == 1
    assert result.failure_detail[0].reason == "INVALID_FACE_TOKEN"
    assert b"good,bad" in recorder.body


def test_faceset_detail_and_listing_cursor() -> None:
    detail = _Recorder(
        {
            "faceset_token": "fs-1",
            "outer_id": "user1",
            "display_name": "User One",
            "user_data": "",
            "tags": "staff",
            "face_count": 2,
            "face_tokens": ["a", "b"],
            "next": "2",
        },
    )
    listing = _Recorder(
        {"facesets": [{"faceset_token": "fs-1", "outer_id": "user1", "display_name": "User One", "tags": ""}], "next": "abc"},
    )

    detail_result = _sdk(detail).faceset().get_detail().set_faceset("user1", "outer_id").end()
    list_result = _sdk(listing).faceset({"start": 1}).get_facesets().end()

    assert isinstance(detail_result, FaceSetDetailResponse)
    assert detail_result.face_tokens == ["a", "b"]
    assert detail_result.next == "2"
    assert isinstance(list_result, FaceSetListResponse)
    assert list_result.facesets[0].faceset_token == "fs-1"
    assert list_result.next == "abc"


def test_search_results_are_ranked() -> None:
    recorder = _Recorder(
        {
            "results": [
                {"face_token": "low", "confidence": 41.2, "user_id": ""},
                {"face_token": "high", "confidence": 96.8, "user_id": "alice"},
                {"face_token": "mid", "confidence": 70.0, "user_id": ""},
            ],
            "thresholds": {"1e-3": 62.3, "1e-4": 69.1, "1e-5": 73.9},
            "image_id": "img",
            "faces": [{"face_token": "probe"}],
        },
    )

    result = (
        _sdk(recorder)
        .search()
        .set_face(b"probe-bytes")
        .set_faceset("user1", "outer_id")
        .set_return_result_count(3)
        .end()
    )

    assert isinstance(result, SearchFaceResponse)
    confidences = [item.confidence for item in result.results]
    assert confidences == sorted(confidences, reverse=True)
    assert result.results[0].user_id == "alice"
    assert recorder.path == "/facepp/v3/search"


def test_search_result_count_bounds() -> None:
    with pytest.raises(ValueError):
        _sdk(_Recorder({})).search().set_return_result_count(6)


def test_face_analyze_batch() -> None:
    recorder = _Recorder({"faces": [{"face_token": "a"}, {"face_token": "b"}]})

    result = _sdk(recorder).face().analyze().set_face_tokens(["a", "b"]).set_return_attributes("age").end()

    assert isinstance(result, FaceAnalyzeResponse)
    assert [face.face_token for face in result.faces] == ["a", "b"]
    assert recorder.path == "/facepp/v3/face/analyze"


def test_face_analyze_rejects_more_than_five_tokens() -> None:
    with pytest.raises(ValueError):
        _sdk(_Recorder({})).face().analyze().set_face_tokens(["a", "b", "c", "d", "e", "f"])


def test_face_set_user_id() -> None:
    recorder = _Recorder({"face_token": "tok", "user_id": "alice"})

    result = _sdk(recorder).face().set_face_token("tok").set_user_id("alice").end()

    assert isinstance(result, FaceSetUserIdResponse)
    assert result.user_id == "alice"
    assert recorder.path == "/facepp/v3/face/setuserid"


def test_endpoint_table_is_complete() -> None:
    paths = {endpoint.path for endpoint in ENDPOINTS.values()}

    assert {
        "/detect",
        "/compare",
        "/search",
        "/faceset/create",
        "/faceset/addface",
        "/faceset/removeface",
        "/faceset/update",
        "/faceset/getdetail",
        "/faceset/delete",
        "/faceset/getfacesets",
        "/face/analyze",
    } <= paths


@pytest.mark.parametrize(
    "build",
    [
        lambda sdk: sdk.face({"face_tokens": list("abcdefg")}).analyze(),
        lambda sdk: sdk.face().analyze().set_option("face_tokens", ["a", "b", "c", "d", "e", "f"]),
        lambda sdk: sdk.face().analyze().set_options({"face_tokens": "a,b,c,d,e,f"}),
    ],
)
def test_face_analyze_limit_applies_to_generic_setters(build: Any) -> None:
    recorder = _Recorder({})

    with pytest.raises(ValueError):
        build(_sdk(recorder)).end()
    assert recorder.requests == []


def test_face_get_detail_decodes_facesets() -> None:
    recorder = _Recorder(
        {
            "face_token": "tok",
            "user_id": "alice",
            "facesets": [
                {"faceset_token": "fs-1", "outer_id": "user1", "display_name": "User One", "tags": "staff"},
                {"faceset_token": "fs-2", "outer_id": "", "display_name": "", "tags": ""},
            ],
        },
    )

    result = _sdk(recorder).face().get_detail().set_face_token("tok").end()

    assert isinstance(result, FaceDetailResponse)
    assert result.user_id == "alice"
    assert [faceset.faceset_token for faceset in result.facesets] == ["fs-1", "fs-2"]
    assert result.facesets[0].tags == "staff"
    assert recorder.path == "/facepp/v3/face/getdetail"


def test_faceset_add_face_reports_quota_failure() -> None:
    recorder = _Recorder(
        {
            "faceset_token": "fs-1",
            "outer_id": "user1",
            "face_added": 1,
            "face_count": 1000,
            "failure_detail": [{"reason": "QUOTA_EXCEEDED", "face_token": "extra"}],
        },
    )

    result = _sdk(recorder).faceset().add_face().set_faceset("fs-1").set_face_tokens(["ok", "extra"]).end()

    assert isinstance(result, FaceSetAddFaceResponse)
    assert result.face_added == 1
    assert result.face_count == 1000
    assert result.failure_detail[0].reason == "QUOTA_EXCEEDED"
    assert result.failure_detail[0].face_token == "extra"
    assert recorder.path == "/facepp/v3/faceset/addface"
