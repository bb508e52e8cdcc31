from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import NoMatchingVariantError, UnrecognizedDiscriminatorError, from_validation_error


class ChatFunctionDeclaration(BaseModel):
    """A function the model may generate JSON arguments for."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: Optional[str] = None
    # JSON schema object describing the arguments
    parameters: Optional[dict[str, Any]] = None


class ChatFunctionCall(BaseModel):
    """Function call echoed back on an assistant message."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    # JSON-encoded arguments, as produced by the model
    arguments: Optional[str] = None


class FunctionCallMode(str, Enum):
    NONE = "none"
    AUTO = "auto"


class NamedFunctionCall(BaseModel):
    """Forces the model to call one specific function."""

    model_config = ConfigDict(frozen=True)

    name: str


# "none": never call a function; "auto": model decides; named: must call that function.
FunctionCall = Union[FunctionCallMode, NamedFunctionCall]


def named(name: str) -> NamedFunctionCall:
    return NamedFunctionCall(name=name)


def encode_function_call(directive: FunctionCall) -> Union[str, dict[str, Any]]:
    """Bare string for none/auto, {"name": ...} for a named function."""
    if isinstance(directive, NamedFunctionCall):
        return {"name": directive.name}
    return FunctionCallMode(directive).value


def decode_function_call(raw: Any, *, field: str = "function_call") -> FunctionCall:
    if isinstance(raw, (FunctionCallMode, NamedFunctionCall)):
        return raw

    if isinstance(raw, str):
        try:
            return FunctionCallMode(raw)
        except ValueError:
            raise UnrecognizedDiscriminatorError(
                raw, field=field, expected=[m.value for m in FunctionCallMode]
            ) from None

    if isinstance(raw, dict):
        try:
            return NamedFunctionCall.model_validate(raw)
        except ValidationError as e:
            raise from_validation_error(e, prefix=field) from e

    raise NoMatchingVariantError(["none", "auto", "named function"], field=field)
