import pytest

from protocodegen.output_types import BytesType, MapType


@pytest.mark.parametrize(
    "map_type, annotation, rust_type",
    [
        (MapType.HASH_MAP, "map", "::std::collections::HashMap"),
        (MapType.BTREE_MAP, "btree_map", "::prost::alloc::collections::BTreeMap"),
    ],
)
def test_map_type(map_type, annotation, rust_type):
    assert map_type.annotation() == annotation
    assert map_type.rust_type() == rust_type


@pytest.mark.parametrize(
    "bytes_type, annotation, rust_type",
    [
        (BytesType.VEC, "vec", "::prost::alloc::vec::Vec<u8>"),
        (BytesType.BYTES, "bytes", "::prost::bytes::Bytes"),
    ],
)
def test_bytes_type(bytes_type, annotation, rust_type):
    assert bytes_type.annotation() == annotation
    assert bytes_type.rust_type() == rust_type


def test_map_annotations_distinct():
    hash_annotation = MapType.HASH_MAP.annotation()
    btree_annotation = MapType.BTREE_MAP.annotation()
    assert {hash_annotation, btree_annotation} == {"map", "btree_map"}


def test_bytes_rust_types_distinct():
    vec_type = BytesType.VEC.rust_type()
    bytes_type = BytesType.BYTES.rust_type()
    assert {vec_type, bytes_type} == {
        "::prost::alloc::vec::Vec<u8>",
        "::prost::bytes::Bytes",
    }