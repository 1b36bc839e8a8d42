"""Locating the ``protoc`` compiler and its bundled include directory."""

from __future__ import annotations

import os
import sys
from pathlib import Path

_PROTOC_ENV = "PROTOC"
_PROTOC_INCLUDE_ENV = "PROTOC_INCLUDE"
_DEFAULT_PROTOC = "protoc"


def _install_hint() -> str:
    if sys.platform == "darwin":
        return "To install it on macOS, run `brew install protobuf`."
    if sys.platform.startswith("linux"):
        return "To install it on Debian, run `apt-get install protobuf-compiler`."
    return "Try installing `protobuf-compiler` or `protobuf` using your package manager."


def error_message_protoc_not_found() -> str:
    """The message reported when the ``protoc`` executable cannot be found."""
    error_msg = (
        "Could not find `protoc`. If `protoc` is installed, try setting the "
        f"`{_PROTOC_ENV}` environment variable to the path of the `protoc` binary."
    )
    download_msg = "It is also available from the protobuf project's release page."
    return f"{error_msg} {_install_hint()} {download_msg}"


def protoc_from_env() -> Path:
    """The ``protoc`` executable named by ``PROTOC``, or plain ``protoc``."""
    value = os.environ.get(_PROTOC_ENV)
    return Path(value) if value is not None else Path(_DEFAULT_PROTOC)


def protoc_include_from_env() -> Path | None:
    """The include directory named by ``PROTOC_INCLUDE``, if set.

    Raises FileNotFoundError when the path does not exist and
    NotADirectoryError when it is not a directory.
    """
    value = os.environ.get(_PROTOC_INCLUDE_ENV)
    if value is None:
        return None
    include = Path(value)
    if not include.exists():
        raise FileNotFoundError(
            f"{_PROTOC_INCLUDE_ENV} environment variable points to "
            f"non-existent directory ({include})"
        )
    if not include.is_dir():
        raise NotADirectoryError(
            f"{_PROTOC_INCLUDE_ENV} environment variable points to "
            f"a non-directory file ({include})"
        )
    return include