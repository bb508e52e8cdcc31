from __future__ import annotations

import uuid
from enum import Enum
from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, ConfigDict, PlainSerializer, PlainValidator, PrivateAttr, ValidationError

from .content import ContentBlock, ImageUrlContent, TextContent
from .either import EitherCodec, Left, Right
from .errors import from_validation_error
from .functions import ChatFunctionCall

# null content (assistant turns carrying only a function_call) decodes as Left(None)
content_codec: EitherCodec[Optional[list[ContentBlock]], str] = EitherCodec(
    Optional[list[ContentBlock]],
    str,
    names=("list[ContentBlock] | null", "str"),
)


def _validate_content(value: Any) -> Union[Left[Optional[list[ContentBlock]]], Right[str]]:
    return content_codec.decode(value, field="content")


MessageContent = Annotated[
    Any,  # Left(list of content blocks or None) or Right(str)
    PlainValidator(_validate_content),
    PlainSerializer(content_codec.encode),
]


class Role(str, Enum):
    SYSTEM = "system"
    ASSISTANT = "assistant"
    USER = "user"
    FUNCTION = "function"


class ChatMessage(BaseModel):
    """
    One conversational turn.

    `content` accepts a Left/Right value or the raw list / string, which is wrapped
    on construction. Every instance gets its own id, and `==` compares ids only:
    two messages with the same role and content are still different turns.
    Use `same_content()` for a structural comparison.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: MessageContent
    name: Optional[str] = None
    function_call: Optional[ChatFunctionCall] = None

    _id: uuid.UUID = PrivateAttr(default_factory=uuid.uuid4)

    @property
    def id(self) -> uuid.UUID:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChatMessage):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def same_content(self, other: "ChatMessage") -> bool:
        return self.encode() == other.encode()

    @classmethod
    def decode(cls, raw: Any) -> "ChatMessage":
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise from_validation_error(e) from e

    def encode(self) -> dict[str, Any]:
        # optional fields appear only when set; content is written unwrapped
        return self.model_dump(mode="json", exclude_none=True)

    def text(self) -> str:
        """Concatenated text of the message (text blocks only for block content)."""
        if isinstance(self.content, Right):
            return self.content.value
        if self.content.value is None:
            return ""
        return "".join(b.text for b in self.content.value if isinstance(b, TextContent))

    def image_urls(self) -> list[str]:
        if isinstance(self.content, Right):
            return []
        if self.content.value is None:
            return []
        return [b.image_url.url for b in self.content.value if isinstance(b, ImageUrlContent)]
