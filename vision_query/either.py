from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union, get_origin

from pydantic import ConfigDict, TypeAdapter, ValidationError

from .errors import DecodeError, NoMatchingVariantError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Left(Generic[T]):
    value: T

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False


@dataclass(frozen=True)
class Right(Generic[U]):
    value: U

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True


Either = Union[Left[T], Right[U]]


def _type_name(tp: Any) -> str:
    origin = get_origin(tp)
    if origin is not None:
        return f"{getattr(origin, '__name__', 'union')}[...]"
    return getattr(tp, "__name__", None) or repr(tp)


class EitherCodec(Generic[T, U]):
    """
    Codec for an untagged two-way union.

    The wire form carries no tag, so decoding is by trial: the left type is always
    attempted first, and a value that satisfies both shapes decodes as Left.
    Encoding emits the populated side's own JSON with no wrapper.
    """

    def __init__(
        self,
        left_type: Any,
        right_type: Any,
        *,
        names: tuple[str, str] | None = None,
        strict: bool = True,
    ) -> None:
        self.left_type = left_type
        self.right_type = right_type
        self.names = names or (_type_name(left_type), _type_name(right_type))
        # strict: no lax coercion (bytes -> str and the like) on either side
        config = ConfigDict(strict=True) if strict else None
        self._left = TypeAdapter(left_type, config=config)
        self._right = TypeAdapter(right_type, config=config)

    def __repr__(self) -> str:
        return f"EitherCodec({self.names[0]}, {self.names[1]})"

    def decode(self, raw: Any, *, field: str | None = None) -> Union[Left[T], Right[U]]:
        if isinstance(raw, (Left, Right)):
            return raw

        causes: list[BaseException] = []
        for adapter, wrap in ((self._left, Left), (self._right, Right)):
            try:
                return wrap(adapter.validate_python(raw))
            except (ValidationError, DecodeError) as e:
                causes.append(e)

        raise NoMatchingVariantError(
            list(self.names),
            field=field,
            causes=causes,
        )

    def encode(self, value: Union[Left[T], Right[U]]) -> Any:
        if isinstance(value, Left):
            return self._left.dump_python(value.value, mode="json", exclude_none=True)
        return self._right.dump_python(value.value, mode="json", exclude_none=True)
