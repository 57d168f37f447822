"""A reusable bundle of decoding and encoding defaults."""

from __future__ import annotations

from typing import Any

import msgspec

from . import decoder, encoder, hydrate
from .decoder import DecodeResult, JsonValue, Text
from .options import DEFAULT_DEPTH, check_depth


class JsonCodec(msgspec.Struct, frozen=True, kw_only=True):
    """Codec that applies the same options to every call.

    The module-level functions behave like a default `JsonCodec()`.
    """

    assoc: bool = False
    depth: int = DEFAULT_DEPTH
    decode_options: int = 0
    encode_options: int = 0

    def __post_init__(self) -> None:
        check_depth(self.depth)

    def decode(self, text: Text) -> JsonValue:
        return decoder.decode(text, self.assoc, self.depth, self.decode_options)

    def try_decode(self, text: Text) -> DecodeResult:
        return decoder.try_decode(text, self.assoc, self.depth, self.decode_options)

    def encode(self, value: Any) -> str:
        return encoder.encode(value, self.encode_options, self.depth)

    def as_array(self, text: Text) -> JsonValue:
        return decoder.as_array(text, self.depth, self.decode_options)

    def as_instance_of(self, type_name: hydrate.TypeName, text: Text) -> Any:
        return hydrate.as_instance_of(type_name, text, self.depth, self.decode_options)

    def as_collection_of_instances(self, type_name: hydrate.TypeName, text: Text) -> list[Any]:
        return hydrate.as_collection_of_instances(
            type_name, text, self.depth, self.decode_options
        )

    def is_valid(self, text: Text) -> bool:
        """Return whether *text* decodes with this codec's options."""
        return self.try_decode(text).ok
