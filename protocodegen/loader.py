"""Producing and reading the serialized descriptor set emitted by ``protoc``."""

from __future__ import annotations

import os
import subprocess
import tempfile
from collections.abc import Iterable, Sequence
from enum import IntEnum
from pathlib import Path

from protocodegen.protoc import (
    error_message_protoc_not_found,
    protoc_from_env,
    protoc_include_from_env,
)

_RECURSION_LIMIT = 100
_FILE_FIELD = 1


class ProtocError(Exception):
    """Raised when a descriptor set cannot be produced or read."""


class _WireType(IntEnum):
    VARINT = 0
    SIXTY_FOUR_BIT = 1
    LENGTH_DELIMITED = 2
    START_GROUP = 3
    END_GROUP = 4
    THIRTY_TWO_BIT = 5


_WIRE_TYPE_NAMES = {
    _WireType.VARINT: "Varint",
    _WireType.SIXTY_FOUR_BIT: "SixtyFourBit",
    _WireType.LENGTH_DELIMITED: "LengthDelimited",
    _WireType.START_GROUP: "StartGroup",
    _WireType.END_GROUP: "EndGroup",
    _WireType.THIRTY_TWO_BIT: "ThirtyTwoBit",
}


class _DecodeError(Exception):
    def __init__(self, description: str, context: str = "") -> None:
        super().__init__(description)
        self.description = description
        self.context = context

    def __str__(self) -> str:
        return f"failed to decode Protobuf message: {self.context}{self.description}"


def _read_varint(data: bytes, pos: int, end: int) -> tuple[int, int]:
    value = 0
    for shift_index in range(10):
        if pos >= end:
            raise _DecodeError("invalid varint")
        byte = data[pos]
        pos += 1
        value |= (byte & 0x7F) << (7 * shift_index)
        if byte < 0x80:
            if shift_index == 9 and byte > 1:
                raise _DecodeError("invalid varint")
            return value, pos
    raise _DecodeError("invalid varint")


def _read_key(data: bytes, pos: int, end: int) -> tuple[int, _WireType, int]:
    key, pos = _read_varint(data, pos, end)
    if key > 0xFFFFFFFF:
        raise _DecodeError(f"invalid key value: {key}")
    wire_value = key & 0x07
    if wire_value > _WireType.THIRTY_TWO_BIT:
        raise _DecodeError(f"invalid wire type value: {wire_value}")
    tag = key >> 3
    if tag < 1:
        raise _DecodeError("invalid tag value: 0")
    return tag, _WireType(wire_value), pos


def _advance(pos: int, count: int, end: int) -> int:
    if count > end - pos:
        raise _DecodeError("buffer underflow")
    return pos + count


def _skip_field(
    wire_type: _WireType, tag: int, data: bytes, pos: int, end: int, depth: int
) -> int:
    if wire_type is _WireType.VARINT:
        _, pos = _read_varint(data, pos, end)
        return pos
    if wire_type is _WireType.SIXTY_FOUR_BIT:
        return _advance(pos, 8, end)
    if wire_type is _WireType.THIRTY_TWO_BIT:
        return _advance(pos, 4, end)
    if wire_type is _WireType.LENGTH_DELIMITED:
        length, pos = _read_varint(data, pos, end)
        return _advance(pos, length, end)
    if wire_type is _WireType.START_GROUP:
        if depth <= 0:
            raise _DecodeError("recursion limit reached")
        while True:
            inner_tag, inner_type, pos = _read_key(data, pos, end)
            if inner_type is _WireType.END_GROUP:
                if inner_tag != tag:
                    raise _DecodeError("unexpected end group tag")
                return pos
            pos = _skip_field(inner_type, inner_tag, data, pos, end, depth - 1)
    raise _DecodeError("unexpected end group tag")


def _check_message(data: bytes, pos: int, end: int, depth: int) -> None:
    while pos < end:
        tag, wire_type, pos = _read_key(data, pos, end)
        pos = _skip_field(wire_type, tag, data, pos, end, depth)


def _check_descriptor_set(data: bytes) -> None:
    """Check that ``data`` is a well-formed serialized FileDescriptorSet."""
    end = len(data)
    pos = 0
    while pos < end:
        tag, wire_type, pos = _read_key(data, pos, end)
        if tag != _FILE_FIELD:
            pos = _skip_field(wire_type, tag, data, pos, end, _RECURSION_LIMIT)
            continue
        context = "FileDescriptorSet.file: "
        try:
            if wire_type is not _WireType.LENGTH_DELIMITED:
                raise _DecodeError(
                    f"invalid wire type: {_WIRE_TYPE_NAMES[wire_type]} "
                    "(expected LengthDelimited)"
                )
            length, pos = _read_varint(data, pos, end)
            start = pos
            pos = _advance(pos, length, end)
            _check_message(data, start, pos, _RECURSION_LIMIT - 1)
        except _DecodeError as error:
            raise _DecodeError(error.description, context + error.context) from None


def _protoc_command(
    protoc_executable: Path,
    output: Path,
    protos: Iterable[os.PathLike[str] | str],
    includes: Iterable[os.PathLike[str] | str],
    skip_source_info: bool,
    protoc_args: Iterable[str],
) -> list[str]:
    cmd = [str(protoc_executable), "--include_imports"]
    if not skip_source_info:
        cmd.append("--include_source_info")
    cmd += ["-o", str(output)]
    for include in includes:
        if Path(include).exists():
            cmd += ["-I", str(include)]
    # Bundled includes go last so user includes can override them.
    protoc_include = protoc_include_from_env()
    if protoc_include is not None:
        cmd += ["-I", str(protoc_include)]
    cmd += [str(arg) for arg in protoc_args]
    cmd += [str(proto) for proto in protos]
    return cmd


def _run_protoc(cmd: list[str], protoc_executable: Path) -> None:
    try:
        result = subprocess.run(cmd, capture_output=True, check=False)
    except FileNotFoundError:
        raise ProtocError(error_message_protoc_not_found()) from None
    except OSError as error:
        raise ProtocError(
            f"failed to invoke protoc (path: {protoc_executable}): {error}"
        ) from error
    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace")
        raise ProtocError(f"protoc failed: {stderr}")


def _read_descriptor_set(path: Path) -> bytes:
    try:
        data = path.read_bytes()
    except OSError as error:
        raise ProtocError(
            f"unable to open file_descriptor_set_path: {path}, OS: {error}"
        ) from error
    try:
        _check_descriptor_set(data)
    except _DecodeError as error:
        raise ProtocError(f"invalid FileDescriptorSet: {error}") from None
    return data


def load_descriptor_set(
    protos: Sequence[os.PathLike[str] | str],
    includes: Sequence[os.PathLike[str] | str],
    protoc_executable: os.PathLike[str] | str | None = None,
    file_descriptor_set_path: os.PathLike[str] | str | None = None,
    skip_protoc_run: bool = False,
    skip_source_info: bool = False,
    protoc_args: Iterable[str] = (),
) -> bytes:
    """Return the serialized FileDescriptorSet for ``protos``.

    Unless ``skip_protoc_run`` is set, ``protoc`` is run to write the set to
    ``file_descriptor_set_path`` (or to a temporary file). The result is
    checked to be well-formed before it is returned; any failure raises
    ProtocError.
    """
    executable = (
        Path(protoc_executable) if protoc_executable is not None else protoc_from_env()
    )

    if file_descriptor_set_path is not None:
        output = Path(file_descriptor_set_path)
        if not skip_protoc_run:
            cmd = _protoc_command(
                executable, output, protos, includes, skip_source_info, protoc_args
            )
            _run_protoc(cmd, executable)
        return _read_descriptor_set(output)

    if skip_protoc_run:
        raise ProtocError("file_descriptor_set_path is required with skip_protoc_run")

    with tempfile.TemporaryDirectory(prefix="protocodegen") as tmp:
        output = Path(tmp) / "descriptor-set"
        cmd = _protoc_command(
            executable, output, protos, includes, skip_source_info, protoc_args
        )
        _run_protoc(cmd, executable)
        return _read_descriptor_set(output)