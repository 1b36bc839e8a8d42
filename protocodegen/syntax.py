"""The protobuf syntax level declared by a file."""

from __future__ import annotations

from enum import Enum


class Syntax(Enum):
    """Protobuf syntax level."""

    PROTO2 = "proto2"
    PROTO3 = "proto3"


def parse_syntax(value: str | None) -> Syntax:
    """Interpret a file's ``syntax`` field; a missing value means proto2."""
    if value is None or value == "proto2":
        return Syntax.PROTO2
    if value == "proto3":
        return Syntax.PROTO3
    raise ValueError(f"unknown syntax: {value}")