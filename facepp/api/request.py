"""Endpoint descriptors and the chained request builder shared by every API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Generic, Mapping, Optional, Type, TypeVar

from facepp.api.errors import FaceConfigurationError
from facepp.api.fields import FieldValue, FilePayload, coerce_field
from facepp.models import (
    CompareFaceResponse,
    DetectFaceResponse,
    FaceAnalyzeResponse,
    FaceDetailResponse,
    FaceResponse,
    FaceSetAddFaceResponse,
    FaceSetCreateResponse,
    FaceSetDeleteResponse,
    FaceSetDetailResponse,
    FaceSetListResponse,
    FaceSetRemoveFaceResponse,
    FaceSetUpdateResponse,
    FaceSetUserIdResponse,
    SearchFaceResponse,
)

if TYPE_CHECKING:
    from facepp.api.client import FaceSDK

ResponseT = TypeVar("ResponseT", bound=FaceResponse)


@dataclass(frozen=True)
class Endpoint(Generic[ResponseT]):
    """A Face++ API path and the model its JSON body decodes into."""

    name: str
    path: str
    response_model: Type[ResponseT]


DETECT = Endpoint("detect", "/detect", DetectFaceResponse)
COMPARE = Endpoint("compare", "/compare", CompareFaceResponse)
SEARCH = Endpoint("search", "/search", SearchFaceResponse)
FACESET_CREATE = Endpoint("faceset.create", "/faceset/create", FaceSetCreateResponse)
FACESET_ADD_FACE = Endpoint("faceset.addface", "/faceset/addface", FaceSetAddFaceResponse)
FACESET_REMOVE_FACE = Endpoint("faceset.removeface", "/faceset/removeface", FaceSetRemoveFaceResponse)
FACESET_UPDATE = Endpoint("faceset.update", "/faceset/update", FaceSetUpdateResponse)
FACESET_GET_DETAIL = Endpoint("faceset.getdetail", "/faceset/getdetail", FaceSetDetailResponse)
FACESET_DELETE = Endpoint("faceset.delete", "/faceset/delete", FaceSetDeleteResponse)
FACESET_LIST = Endpoint("faceset.getfacesets", "/faceset/getfacesets", FaceSetListResponse)
FACE_ANALYZE = Endpoint("face.analyze", "/face/analyze", FaceAnalyzeResponse)
FACE_GET_DETAIL = Endpoint("face.getdetail", "/face/getdetail", FaceDetailResponse)
FACE_SET_USER_ID = Endpoint("face.setuserid", "/face/setuserid", FaceSetUserIdResponse)

ENDPOINTS: Dict[str, Endpoint[Any]] = {
    endpoint.name: endpoint
    for endpoint in (
        DETECT,
        COMPARE,
        SEARCH,
        FACESET_CREATE,
        FACESET_ADD_FACE,
        FACESET_REMOVE_FACE,
        FACESET_UPDATE,
        FACESET_GET_DETAIL,
        FACESET_DELETE,
        FACESET_LIST,
        FACE_ANALYZE,
        FACE_GET_DETAIL,
        FACE_SET_USER_ID,
    )
}


class FaceRequest(Generic[ResponseT]):
    """Collects form fields for one API call and sends them exactly once.

    Scalar fields and file uploads are kept apart; writing a name again replaces
    the earlier value wherever it was stored.
    """

    def __init__(
        self,
        sdk: "FaceSDK",
        endpoint: Optional[Endpoint[ResponseT]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._sdk = sdk
        self._endpoint = endpoint
        self._fields: Dict[str, FieldValue] = {}
        self._files: Dict[str, FilePayload] = {}
        self._sent = False
        if options:
            self.set_options(options)
        self._fields.update(sdk.credentials())

    @property
    def endpoint(self) -> Optional[Endpoint[ResponseT]]:
        return self._endpoint

    @property
    def fields(self) -> Dict[str, FieldValue]:
        """Copy of the scalar fields collected so far."""

        return dict(self._fields)

    @property
    def files(self) -> Dict[str, FilePayload]:
        """Copy of the file uploads collected so far."""

        return dict(self._files)

    def set_option(self, key: str, value: Any) -> "FaceRequest[ResponseT]":
        """Set a request field; file fields are attached as uploads."""

        coerced = coerce_field(key, value)
        if isinstance(coerced, FilePayload):
            self._fields.pop(key, None)
            self._files[key] = coerced
        else:
            self._files.pop(key, None)
            self._fields[key] = coerced
        return self

    def set_options(self, options: Mapping[str, Any]) -> "FaceRequest[ResponseT]":
        for key, value in options.items():
            self.set_option(key, value)
        return self

    def _select(self, endpoint: Endpoint[Any]) -> "FaceRequest[Any]":
        self._endpoint = endpoint
        return self

    def end(self) -> ResponseT:
        """Send the request and return the decoded response."""

        if self._endpoint is None:
            raise FaceConfigurationError(
                f"{type(self).__name__} has no operation selected; choose one before end().",
            )
        if self._sent:
            raise FaceConfigurationError("A request can only be sent once; create a new one.")
        self._sent = True
        return self._sdk.call(self._endpoint, self._fields, self._files)


def require_kind(kind: str, allowed: frozenset[str]) -> None:
    if kind not in allowed:
        raise ValueError(f"Unsupported input kind {kind!r}; expected one of {sorted(allowed)}.")
