from __future__ import annotations

import base64
import os
from pathlib import Path
from typing import Any, Optional

from .content import ImageUrlContent, image_block
from .errors import InvalidValueError


def _is_http_url(s: str) -> bool:
    return isinstance(s, str) and s.startswith(("http://", "https://"))


def _is_data_uri(s: str) -> bool:
    return isinstance(s, str) and s.startswith("data:")


def detect_image_type(binary_data: bytes) -> str:
    """Detect an image MIME type from its magic number."""
    if binary_data.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    elif binary_data.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    elif binary_data.startswith((b"GIF87a", b"GIF89a")):
        return "image/gif"
    elif binary_data.startswith(b"RIFF") and binary_data[8:12] == b"WEBP":
        return "image/webp"

    raise InvalidValueError("unknown or unsupported image type", field="image_url")


def to_bytes(obj: Any) -> bytes:
    """
    - bytes -> bytes
    - Path / os.PathLike / str path -> file bytes
    - file-like -> read()
    """
    if obj is None:
        raise InvalidValueError("image is None", field="image_url")

    if isinstance(obj, (bytes, bytearray)):
        return bytes(obj)

    if isinstance(obj, (str, os.PathLike)):
        return Path(obj).read_bytes()

    if hasattr(obj, "read"):
        if hasattr(obj, "seek"):
            obj.seek(0)
        data = obj.read()
        if isinstance(data, str):
            data = data.encode()
        return data

    raise InvalidValueError(f"unsupported image source: {type(obj).__name__}", field="image_url")


def image_data_url(obj: Any, mime_type: Optional[str] = None) -> str:
    """
    Build an image reference for a content block.

    http(s) and data: URLs are returned unchanged; nothing is fetched. Anything
    else is read into memory and base64-encoded as a data: URL.
    """
    if isinstance(obj, str) and (_is_http_url(obj) or _is_data_uri(obj)):
        return obj

    data = to_bytes(obj)
    mime = mime_type or detect_image_type(data)
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"


def image_block_from(obj: Any, *, mime_type: Optional[str] = None, detail: Optional[str] = None) -> ImageUrlContent:
    return image_block(image_data_url(obj, mime_type), detail=detail)
