from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, PlainSerializer, PlainValidator, ValidationError

from .errors import InvalidValueError, MissingFieldError, UnrecognizedDiscriminatorError, from_validation_error

CONTENT_TYPES = ("text", "image_url")


class ImageURL(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    # low / high / auto; omitted from the wire when unset
    detail: Optional[Literal["low", "high", "auto"]] = None


class TextContent(BaseModel):
    """A run of text inside a message."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str

    def encode(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class ImageUrlContent(BaseModel):
    """A reference to an image, either an http(s) URL or a data: URL."""

    model_config = ConfigDict(frozen=True)

    type: Literal["image_url"] = "image_url"
    image_url: ImageURL

    @property
    def url(self) -> str:
        return self.image_url.url

    def encode(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


_VARIANTS: dict[str, type[BaseModel]] = {
    "text": TextContent,
    "image_url": ImageUrlContent,
}


def text_block(text: str) -> TextContent:
    return TextContent(text=text)


def image_block(url: str, detail: Optional[str] = None) -> ImageUrlContent:
    return ImageUrlContent(image_url=ImageURL(url=url, detail=detail))


def decode_content_block(raw: Any) -> Union[TextContent, ImageUrlContent]:
    """
    Decode one content block.

    The `type` tag is read first and only the matching payload field is decoded;
    a payload field belonging to the other kind is ignored.
    """
    if isinstance(raw, (TextContent, ImageUrlContent)):
        return raw
    if not isinstance(raw, dict):
        raise InvalidValueError(f"content block must be an object, got {type(raw).__name__}")
    if "type" not in raw:
        raise MissingFieldError("type")

    kind = raw["type"]
    model = _VARIANTS.get(kind) if isinstance(kind, str) else None
    if model is None:
        raise UnrecognizedDiscriminatorError(kind, field="type", expected=CONTENT_TYPES)

    payload_key = "text" if model is TextContent else "image_url"
    if payload_key not in raw:
        raise MissingFieldError(payload_key)

    try:
        return model.model_validate({"type": kind, payload_key: raw[payload_key]})
    except ValidationError as e:
        raise from_validation_error(e) from e


def encode_content_block(block: Union[TextContent, ImageUrlContent]) -> dict[str, Any]:
    return block.encode()


# Block lists inside messages decode through the same tag-first path.
ContentBlock = Annotated[
    Union[TextContent, ImageUrlContent],
    PlainValidator(decode_content_block),
    PlainSerializer(encode_content_block),
]
