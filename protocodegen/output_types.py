"""Collection types emitted for protobuf map and bytes fields."""

from __future__ import annotations

from enum import Enum


class MapType(Enum):
    """The map collection type emitted for protobuf ``map`` fields.

    ``HASH_MAP`` is the default.
    """

    HASH_MAP = "hash_map"
    BTREE_MAP = "btree_map"

    def annotation(self) -> str:
        """The field annotation naming this map type."""
        return "map" if self is MapType.HASH_MAP else "btree_map"

    def rust_type(self) -> str:
        """The fully qualified generated type for this map type."""
        if self is MapType.HASH_MAP:
            return "::std::collections::HashMap"
        return "::prost::alloc::collections::BTreeMap"


class BytesType(Enum):
    """The collection type emitted for protobuf ``bytes`` fields.

    ``VEC`` is the default.
    """

    VEC = "vec"
    BYTES = "bytes"

    def annotation(self) -> str:
        """The field annotation naming this bytes type."""
        return "vec" if self is BytesType.VEC else "bytes"

    def rust_type(self) -> str:
        """The fully qualified generated type for this bytes type."""
        if self is BytesType.VEC:
            return "::prost::alloc::vec::Vec<u8>"
        return "::prost::bytes::Bytes"