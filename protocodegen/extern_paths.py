"""Substitution of externally provided protobuf packages and types."""

from __future__ import annotations

from collections.abc import Iterable

from protocodegen.ident import to_snake, to_upper_camel

_WELL_KNOWN_TYPES = (
    (".google.protobuf", "::prost_types"),
    (".google.protobuf.BoolValue", "bool"),
    (".google.protobuf.BytesValue", "::prost::alloc::vec::Vec<u8>"),
    (".google.protobuf.DoubleValue", "f64"),
    (".google.protobuf.Empty", "()"),
    (".google.protobuf.FloatValue", "f32"),
    (".google.protobuf.Int32Value", "i32"),
    (".google.protobuf.Int64Value", "i64"),
    (".google.protobuf.StringValue", "::prost::alloc::string::String"),
    (".google.protobuf.UInt32Value", "u32"),
    (".google.protobuf.UInt64Value", "u64"),
)


class ExternPathError(ValueError):
    """Raised when an extern path is malformed or declared twice."""


def validate_proto_path(path: str) -> None:
    """Check that ``path`` is a fully qualified protobuf path.

    Raises ExternPathError otherwise.
    """
    if not path.startswith("."):
        raise ExternPathError(
            "Protobuf paths must be fully qualified (begin with a leading '.'): "
            f"{path}"
        )
    if any(part == "" for part in path.split(".")[1:]):
        raise ExternPathError(f"invalid fully-qualified Protobuf path: {path}")


class ExternPaths:
    """A table of protobuf paths that map to existing generated types."""

    def __init__(self, paths: Iterable[tuple[str, str]], prost_types: bool) -> None:
        self._paths: dict[str, str] = {}
        for proto_path, rust_path in paths:
            self._insert(proto_path, rust_path)
        if prost_types:
            for proto_path, rust_path in _WELL_KNOWN_TYPES:
                self._insert(proto_path, rust_path)

    def _insert(self, proto_path: str, rust_path: str) -> None:
        validate_proto_path(proto_path)
        if proto_path in self._paths:
            raise ExternPathError(f"duplicate extern Protobuf path: {proto_path}")
        self._paths[proto_path] = rust_path

    def resolve_ident(self, pb_ident: str) -> str | None:
        """Resolve a fully qualified protobuf identifier to an extern path, if any."""
        if not pb_ident.startswith("."):
            raise ValueError(f"identifier is not fully qualified: {pb_ident!r}")

        exact = self._paths.get(pb_ident)
        if exact is not None:
            return exact

        dots = [i for i, char in enumerate(pb_ident) if char == "."]
        for idx in reversed(dots):
            rust_path = self._paths.get(pb_ident[:idx])
            if rust_path is None:
                continue
            *segments, ident_type = pb_ident[idx + 1 :].split(".")
            parts = [
                segment if position == 0 and segment == "crate" else to_snake(segment)
                for position, segment in enumerate(rust_path.split("::") + segments)
            ]
            parts.append(to_upper_camel(ident_type))
            return "::".join(parts)

        return None