from __future__ import annotations

import json
from typing import Annotated, Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, PlainSerializer, PlainValidator, ValidationError

from .errors import from_validation_error
from .functions import ChatFunctionDeclaration, FunctionCall, decode_function_call, encode_function_call
from .message import ChatMessage


class ResponseFormat(BaseModel):
    """An object specifying the format that the model must output."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text", "json_object"] = "text"


FunctionCallDirective = Annotated[
    FunctionCall,
    PlainValidator(decode_function_call),
    PlainSerializer(encode_function_call),
]


class Query(BaseModel):
    """
    Request body for the chat/vision completions endpoint.

    Every generation control is optional and forwarded as-is; ranges (temperature
    0-2, penalties -2.0-2.0, ...) are the server's business. Unset controls are left
    out of the encoded body, while `stream` is always written.
    """

    model_config = ConfigDict(frozen=True)

    model: str
    messages: list[ChatMessage]
    response_format: Optional[ResponseFormat] = None

    # functions the model may generate JSON inputs for
    functions: Optional[list[ChatFunctionDeclaration]] = None
    # "none" is the server default without functions, "auto" with them
    function_call: Optional[FunctionCallDirective] = None

    temperature: Optional[float] = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    stop: Optional[list[str]] = None
    max_tokens: Optional[int] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    logit_bias: Optional[dict[str, int]] = None
    # end-user identifier, used by the provider for abuse monitoring
    user: Optional[str] = None

    stream: bool = False

    @classmethod
    def decode(cls, raw: Any) -> "Query":
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise from_validation_error(e) from e

    @classmethod
    def from_json(cls, data: str | bytes) -> "Query":
        return cls.decode(json.loads(data))

    def encode(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self) -> str:
        return json.dumps(self.encode(), ensure_ascii=False)

    def make_streamable(self) -> "Query":
        """Copy of this query with `stream` switched on."""
        return self.model_copy(update={"stream": True})
