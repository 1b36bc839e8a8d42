"""Comments and service descriptions handed to code generators."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

_INDENT = "    "
_RULE_URL = re.compile(r"https?://[^\s)]+")
_RULE_BRACKETS = re.compile(r"(^|[^\]\\])\[(([^\]]*[^\\])?)\]([^(\[]|$)")


def get_lines(comments: str) -> list[str]:
    """Split a comment into lines, dropping line terminators."""
    if not comments:
        return []
    lines = comments.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass
class Location:
    """Source location information for one declaration."""

    path: list[int] = field(default_factory=list)
    span: list[int] = field(default_factory=list)
    leading_comments: str | None = None
    trailing_comments: str | None = None
    leading_detached_comments: list[str] = field(default_factory=list)


def _should_indent(line: str) -> bool:
    if not line:
        return False
    return line[0] != " " or line[1:2] == " "


def _escape_brackets(match: re.Match[str]) -> str:
    before = match.group(1) or ""
    inner = match.group(2) or ""
    after = match.group(4) or ""
    return f"{before}\\[{inner}\\]{after}"


def _sanitize_line(line: str) -> str:
    text = _RULE_URL.sub(lambda m: f"<{m.group(0)}>", line)
    text = _RULE_BRACKETS.sub(_escape_brackets, text)
    return " " + text if _should_indent(text) else text


@dataclass
class Comments:
    """Comments attached to a protobuf item."""

    leading_detached: list[list[str]] = field(default_factory=list)
    leading: list[str] = field(default_factory=list)
    trailing: list[str] = field(default_factory=list)

    @classmethod
    def from_location(cls, location: Location) -> Comments:
        """Collect the comments recorded at a source location."""
        return cls(
            leading_detached=[get_lines(c) for c in location.leading_detached_comments],
            leading=get_lines(location.leading_comments or ""),
            trailing=get_lines(location.trailing_comments or ""),
        )

    def append_with_indent(self, indent_level: int) -> str:
        """Render the comments, each indent level being four spaces."""
        indent = _INDENT * indent_level
        out: list[str] = []

        for block in self.leading_detached:
            out.extend(f"{indent}//{_sanitize_line(line)}\n" for line in block)
            out.append("\n")

        out.extend(f"{indent}///{_sanitize_line(line)}\n" for line in self.leading)

        if self.leading and self.trailing:
            out.append(f"{indent}///\n")

        out.extend(f"{indent}///{_sanitize_line(line)}\n" for line in self.trailing)
        return "".join(out)


@dataclass
class Method:
    """A service method."""

    name: str
    proto_name: str
    input_type: str
    output_type: str
    input_proto_type: str
    output_proto_type: str
    comments: Comments = field(default_factory=Comments)
    options: dict[str, Any] = field(default_factory=dict)
    client_streaming: bool = False
    server_streaming: bool = False


@dataclass
class Service:
    """A service and its methods."""

    name: str
    proto_name: str
    package: str
    comments: Comments = field(default_factory=Comments)
    methods: list[Method] = field(default_factory=list)
    options: dict[str, Any] = field(default_factory=dict)