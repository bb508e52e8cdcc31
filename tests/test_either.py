"""
Unit tests for the untagged two-way union codec.
"""

import pytest

from vision_query.content import ContentBlock, TextContent
from vision_query.either import EitherCodec, Left, Right
from vision_query.errors import DecodeError, NoMatchingVariantError


@pytest.fixture
def codec():
    return EitherCodec(list[ContentBlock], str)


class TestDecode:
    """Decoding raw JSON values into Left/Right."""

    def test_string_decodes_as_right(self, codec):
        value = codec.decode("hello")
        assert isinstance(value, Right)
        assert value.value == "hello"
        assert value.is_right()

    def test_block_list_decodes_as_left(self, codec):
        value = codec.decode([{"type": "text", "text": "hi"}])
        assert isinstance(value, Left)
        assert value.is_left()
        assert value.value == [TextContent(text="hi")]

    def test_empty_list_decodes_as_left(self, codec):
        assert codec.decode([]) == Left([])

    def test_left_is_tried_first(self):
        """A value both sides accept is classified as Left."""
        codec = EitherCodec(str, str)
        assert codec.decode("both") == Left("both")

    def test_wrapped_values_pass_through(self, codec):
        wrapped = Right("already")
        assert codec.decode(wrapped) is wrapped

    def test_no_matching_variant(self, codec):
        with pytest.raises(NoMatchingVariantError) as exc_info:
            codec.decode(42, field="content")

        err = exc_info.value
        assert isinstance(err, DecodeError)
        assert err.field == "content"
        assert len(err.variants) == 2
        assert len(err.causes) == 2

    def test_list_with_bad_block_is_rejected(self, codec):
        with pytest.raises(NoMatchingVariantError):
            codec.decode([{"type": "video", "url": "x"}])


    def test_variant_names(self, codec):
        assert codec.names == ("list[...]", "str")
        labelled = EitherCodec(list[ContentBlock], str, names=("blocks", "text"))
        with pytest.raises(NoMatchingVariantError) as exc_info:
            labelled.decode(1.5)
        assert str(exc_info.value) == "value matches none of: blocks, text"

    def test_strict_rejects_bytes(self, codec):
        with pytest.raises(NoMatchingVariantError):
            codec.decode(b"hello")

    def test_lax_mode_coerces_bytes(self):
        assert EitherCodec(list[ContentBlock], str, strict=False).decode(b"hello") == Right("hello")


class TestEncode:
    """Encoding emits the populated side without a wrapper."""

    def test_right_encodes_as_plain_string(self, codec):
        assert codec.encode(Right("hello")) == "hello"

    def test_left_encodes_as_plain_array(self, codec):
        encoded = codec.encode(Left([TextContent(text="hi")]))
        assert encoded == [{"type": "text", "text": "hi"}]

    def test_variants_compare_structurally(self):
        assert Left("a") == Left("a")
        assert Left("a") != Right("a")
