import pytest

from protocodegen.ast import Comments, Location, Method, Service, get_lines


def render_trailing(line):
    return Comments(trailing=[line]).append_with_indent(0)


@pytest.mark.parametrize(
    "line, expected",
    [
        (" A line with a single leading space.", "/// A line with a single leading space.\n"),
        ("A line without a single leading space.", "/// A line without a single leading space.\n"),
        ("", "///\n"),
        (
            "  a line with several leading spaces, such as in a markdown list",
            "///   a line with several leading spaces, such as in a markdown list\n",
        ),
    ],
)
def test_leaves_prespaced_lines(line, expected):
    assert render_trailing(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("See https://www.rust-lang.org/", "/// See <https://www.rust-lang.org/>\n"),
        ("See http://www.rust-lang.org/", "/// See <http://www.rust-lang.org/>\n"),
        ("See (https://www.rust-lang.org/)", "/// See (<https://www.rust-lang.org/>)\n"),
        ("See note://abc", "/// See note://abc\n"),
    ],
)
def test_sanitizes_doc_url(line, expected):
    assert render_trailing(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("foo [bar] baz", "/// foo \\[bar\\] baz\n"),
        ("foo [= baz", "/// foo [= baz\n"),
        ("foo =] baz", "/// foo =] baz\n"),
        ("[0, 9)", "/// [0, 9)\n"),
        ("foo [bar](bar) baz", "/// foo [bar](bar) baz\n"),
        ("foo [bar]", "/// foo \\[bar\\]\n"),
        ("foo [bar]baz", "/// foo \\[bar\\]baz\n"),
        ("foo []", "/// foo \\[\\]\n"),
        ("foo []()", "/// foo []()\n"),
        ("foo [bar][bar] baz", "/// foo [bar][bar] baz\n"),
        ("foo [bar][baz]", "/// foo [bar][baz]\n"),
        ("[bar][baz]", "/// [bar][baz]\n"),
        ("\\[bar\\]\\[baz\\]", "/// \\[bar\\]\\[baz\\]\n"),
        ("\\[\\]\\[\\]", "/// \\[\\]\\[\\]\n"),
    ],
)
def test_sanitizes_square_brackets(line, expected):
    assert render_trailing(line) == expected


@pytest.mark.parametrize(
    "text",
    [
        "    thingy\n",
        "```rust\nfoo.bar()\n```\n",
        "```javascript\nfoo.bar()\n```\n",
    ],
)
def test_codeblocks(text):
    comments = Comments.from_location(Location(leading_comments=text))
    assert comments.leading == text.splitlines()


def test_get_lines():
    assert get_lines("") == []
    assert get_lines("a\nb") == ["a", "b"]
    assert get_lines("a\r\nb\n") == ["a", "b"]
    assert get_lines("\n") == [""]


def test_from_location_collects_all_kinds():
    location = Location(
        leading_comments=" lead\n",
        trailing_comments=" trail\n",
        leading_detached_comments=[" one\n two\n", " three\n"],
    )
    comments = Comments.from_location(location)
    assert comments.leading == [" lead"]
    assert comments.trailing == [" trail"]
    assert comments.leading_detached == [[" one", " two"], [" three"]]


def test_append_full_layout_with_indent():
    comments = Comments(
        leading_detached=[["detached"]],
        leading=["lead"],
        trailing=["trail"],
    )
    assert comments.append_with_indent(1) == (
        "    // detached\n"
        "\n"
        "    /// lead\n"
        "    ///\n"
        "    /// trail\n"
    )


def test_no_separator_without_trailing():
    assert Comments(leading=["lead"]).append_with_indent(2) == "        /// lead\n"


def test_empty_comments_render_nothing():
    assert Comments().append_with_indent(3) == ""


def test_service_holds_methods():
    method = Method(
        name="say_hello",
        proto_name="SayHello",
        input_type="super::Request",
        output_type="super::Reply",
        input_proto_type=".pkg.Request",
        output_proto_type=".pkg.Reply",
        server_streaming=True,
    )
    service = Service(name="Greeter", proto_name="Greeter", package="pkg", methods=[method])
    assert service.methods[0].proto_name == "SayHello"
    assert service.methods[0].server_streaming is True
    assert service.methods[0].client_streaming is False
    assert service.comments.append_with_indent(0) == ""