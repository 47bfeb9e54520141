"""Typed request field values: scalars and file uploads."""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Any, Sequence, Union

from PIL import Image

FILE_FIELDS = frozenset({"image_file", "image_file1", "image_file2"})


@dataclass(slots=True, frozen=True)
class FilePayload:
    """Binary content sent as a file part of the multipart body."""

    content: bytes
    filename: str
    content_type: str = "application/octet-stream"

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "FilePayload":
        source = Path(path).expanduser()
        if not source.exists():
            raise FileNotFoundError(f"Image file not found: {source}")
        content_type = mimetypes.guess_type(source.name)[0] or "application/octet-stream"
        return cls(content=source.read_bytes(), filename=source.name, content_type=content_type)

    @classmethod
    def from_image(cls, image: Image.Image, fmt: str = "JPEG", name: str = "image") -> "FilePayload":
        """Encode an in-memory Pillow image, converting to RGB for JPEG output."""

        if fmt.upper() == "JPEG" and image.mode not in ("RGB", "L"):
            image = image.convert("RGB")
        buffer = BytesIO()
        image.save(buffer, format=fmt)
        extension = fmt.lower().replace("jpeg", "jpg")
        return cls(
            content=buffer.getvalue(),
            filename=f"{name}.{extension}",
            content_type=Image.MIME.get(fmt.upper(), "application/octet-stream"),
        )


FieldValue = Union[str, int, float, FilePayload]


def coerce_field(name: str, value: Any) -> FieldValue:
    """Normalise a caller-supplied value into a :data:`FieldValue`."""

    if isinstance(value, FilePayload):
        return value
    if name in FILE_FIELDS:
        if isinstance(value, Image.Image):
            return FilePayload.from_image(value, name=name)
        if isinstance(value, (bytes, bytearray)):
            return FilePayload(content=bytes(value), filename=name)
        if isinstance(value, (str, Path)):
            return FilePayload.from_path(value)
        raise TypeError(f"Unsupported value for file field {name!r}: {type(value).__name__}")
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (str, int, float)):
        return value
    if isinstance(value, Sequence) and all(isinstance(item, str) for item in value):
        return ",".join(value)
    raise TypeError(f"Unsupported value for field {name!r}: {type(value).__name__}")
