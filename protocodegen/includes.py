"""Writing the include file that gathers generated modules, and change-aware writes."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

_INDENT = "    "


def _line(depth: int, text: str) -> str:
    return f"{_INDENT * depth}{text}\n"


def write_includes(
    modules: Iterable[Sequence[str]],
    file_names: Mapping[tuple[str, ...], str],
    basepath: os.PathLike[str] | str | None = None,
) -> str:
    """Render nested ``pub mod`` blocks that include each module's generated file.

    Each module is a sequence of package name parts; the empty sequence is the
    default (package-less) module. ``file_names`` maps every module, as a tuple,
    to the file holding its code. With a ``basepath`` the files are included by
    relative name, otherwise relative to the ``OUT_DIR`` build directory.
    Raises KeyError when a module has no file name.
    """
    lines: list[str] = []
    stack: list[str] = []

    for module in sorted(tuple(m) for m in modules):
        while module[: len(stack)] != tuple(stack):
            stack.pop()
            lines.append(_line(len(stack), "}"))
        while len(stack) < len(module):
            part = module[len(stack)]
            lines.append(_line(len(stack), f"pub mod {part} {{"))
            stack.append(part)

        try:
            file_name = file_names[module]
        except KeyError:
            raise KeyError(f"no file name for module {'.'.join(module)!r}") from None

        if basepath is not None:
            include = f'include!("{file_name}");'
        else:
            include = f'include!(concat!(env!("OUT_DIR"), "/{file_name}"));'
        lines.append(_line(len(stack), include))

    for depth in reversed(range(len(stack))):
        lines.append(_line(depth, "}"))

    return "".join(lines)


def write_file_if_changed(path: os.PathLike[str] | str, content: bytes | str) -> bool:
    """Replace the file at ``path`` with ``content`` unless it already holds it.

    Returns True when the file was written and False when it was left untouched.
    """
    target = Path(path)
    data = content.encode("utf-8") if isinstance(content, str) else bytes(content)
    try:
        if target.read_bytes() == data:
            return False
    except OSError:
        pass
    target.write_bytes(data)
    return True