from __future__ import annotations

__all__ = [
    "ChatFunctionCall",
    "ChatFunctionDeclaration",
    "ChatMessage",
    "ClientConfig",
    "ContentBlock",
    "DecodeError",
    "EitherCodec",
    "FunctionCall",
    "FunctionCallMode",
    "ImageURL",
    "ImageUrlContent",
    "Left",
    "MissingFieldError",
    "NamedFunctionCall",
    "NoMatchingVariantError",
    "PreparedRequest",
    "Query",
    "ResponseFormat",
    "Right",
    "Role",
    "TextContent",
    "UnrecognizedDiscriminatorError",
    "VisionQueryError",
    "image_block",
    "image_block_from",
    "named",
    "prepare_request",
    "text_block",
]

from .config import ClientConfig
from .content import ContentBlock, ImageURL, ImageUrlContent, TextContent, image_block, text_block
from .either import EitherCodec, Left, Right
from .errors import (
    DecodeError,
    MissingFieldError,
    NoMatchingVariantError,
    UnrecognizedDiscriminatorError,
    VisionQueryError,
)
from .functions import ChatFunctionCall, ChatFunctionDeclaration, FunctionCall, FunctionCallMode, NamedFunctionCall, named
from .images import image_block_from
from .message import ChatMessage, Role
from .query import Query, ResponseFormat
from .request import PreparedRequest, prepare_request
