from __future__ import annotations

from typing import Any, Optional, Sequence

from pydantic import ValidationError


class VisionQueryError(Exception):
    """Base error for vision-query."""


class ConfigError(VisionQueryError):
    """A configuration value could not be read or parsed."""


class DecodeError(VisionQueryError):
    """
    Wire JSON could not be decoded into a model.

    Not a ValueError subclass, so it passes through pydantic field validators
    unchanged.
    """

    def __init__(self, message: str | None = None, *, field: str | None = None) -> None:
        self.field = field
        if message is None:
            message = "decode error"
        if field:
            message = f"{field}: {message}"
        super().__init__(message)


class MissingFieldError(DecodeError):
    """A required key is absent from the input."""

    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(message or "missing required field", field=field)


class UnrecognizedDiscriminatorError(DecodeError):
    """A tag value is outside the known set."""

    def __init__(self, value: Any, *, field: str | None = None, expected: Sequence[str] = ()) -> None:
        self.value = value
        self.expected = tuple(expected)
        message = f"unrecognized value {value!r}"
        if self.expected:
            message += f" (expected one of: {', '.join(self.expected)})"
        super().__init__(message, field=field)


class NoMatchingVariantError(DecodeError):
    """Every candidate variant of a union rejected the input."""

    def __init__(
        self,
        variants: Sequence[str],
        *,
        field: str | None = None,
        causes: Sequence[BaseException] = (),
    ) -> None:
        self.variants = tuple(variants)
        self.causes = tuple(causes)
        super().__init__(f"value matches none of: {', '.join(self.variants)}", field=field)


class InvalidValueError(DecodeError):
    """A field is present but has the wrong type or an unsupported value."""


def _loc_to_field(loc: Sequence[Any], prefix: Optional[str] = None) -> str:
    parts = [str(p) for p in loc]
    if prefix:
        parts.insert(0, prefix)
    return ".".join(parts)


def from_validation_error(exc: ValidationError, *, prefix: Optional[str] = None) -> DecodeError:
    """
    Translate the first error of a pydantic ValidationError into the decode taxonomy.

    Discriminated-union failures map to UnrecognizedDiscriminatorError (bad tag) or
    MissingFieldError (no tag); "missing" maps to MissingFieldError; everything else
    becomes InvalidValueError.
    """
    errors = exc.errors()
    if not errors:
        return DecodeError(str(exc), field=prefix)

    err = errors[0]
    etype = err.get("type", "")
    loc = tuple(err.get("loc", ()))
    ctx = err.get("ctx") or {}

    if etype == "union_tag_invalid":
        expected = [t.strip().strip("'") for t in str(ctx.get("expected_tags", "")).split(",") if t.strip()]
        return UnrecognizedDiscriminatorError(
            ctx.get("tag"),
            field=_loc_to_field(loc + (ctx.get("discriminator", "type").strip("'"),), prefix),
            expected=expected,
        )
    if etype == "union_tag_not_found":
        return MissingFieldError(_loc_to_field(loc + (ctx.get("discriminator", "type").strip("'"),), prefix))
    if etype == "missing":
        return MissingFieldError(_loc_to_field(loc, prefix))
    if etype in ("enum", "literal_error"):
        return UnrecognizedDiscriminatorError(
            err.get("input"),
            field=_loc_to_field(loc, prefix),
        )
    return InvalidValueError(err.get("msg") or str(exc), field=_loc_to_field(loc, prefix) or None)
