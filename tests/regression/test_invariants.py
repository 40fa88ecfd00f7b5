"""
Invariant tests for the CSS transform engine.

Each test sweeps a fixed corpus rather than a single example.
"""

import re

import pytest

from src.components.css_compiler import RuleCompiler, classify
from src.components.css_sanitizer import CssSanitizer
from src.domain.entities import BREAKPOINT_ORDER, Breakpoint

TOKEN = "abc123"

CORPUS = [
    "",
    "   ",
    "color: red;",
    "& { padding: 10px; } &:hover { opacity: .5; }",
    "behavior: url(evil.htc); color:blue;",
    "<<script>script>alert(1)<</script>/script>",
    "javajavascript:script:alert(1)",
    "@im@importport url(x.css);",
    "expexpression(ression(alert(1))",
    "-moz--moz-binding:binding: url(x.xml);",
    "<style>body{}</style>& p { color: red; }",
    "DATA:TEXT/HTML;base64,xx vbscript:x",
    "width: 10px; {",
    "} height: 2px;",
    "< not a tag >",
]


def _casings(token: str) -> list[str]:
    alternating = "".join(c.upper() if i % 2 else c.lower() for i, c in enumerate(token))
    return [token.lower(), token.upper(), alternating]


# Forbidden token -> exploit template
EXPLOITS = {
    "javascript:": "background: url({tok}alert(1)); color: red;",
    "vbscript:": "background: url({tok}msgbox(1)); color: red;",
    "data:text/html": "background: url({tok},<b>x</b>); color: red;",
    "@import": "{tok} url(https://evil.example/x.css); color: red;",
    "behavior:": "{tok} url(evil.htc); color: red;",
    "expression(": "width: {tok}alert(1)); color: red;",
    "-moz-binding:": "{tok} url(evil.xml#x); color: red;",
}


@pytest.fixture
def sanitizer() -> CssSanitizer:
    return CssSanitizer()


@pytest.fixture
def compiler() -> RuleCompiler:
    return RuleCompiler()


# --- Sanitizer ---


@pytest.mark.parametrize("css", CORPUS)
def test_sanitizer_idempotent(sanitizer: CssSanitizer, css: str) -> None:
    once = sanitizer.sanitize(css)
    assert sanitizer.sanitize(once) == once


@pytest.mark.parametrize("css", CORPUS)
def test_sanitizer_output_shape(sanitizer: CssSanitizer, css: str) -> None:
    result = sanitizer.sanitize(css)
    assert result == result.strip()
    assert not re.search(r"<[a-zA-Z/!?]", result)


@pytest.mark.parametrize("token", sorted(EXPLOITS))
def test_deny_list_complete(sanitizer: CssSanitizer, token: str) -> None:
    for cased in _casings(token):
        result = sanitizer.sanitize(EXPLOITS[token].format(tok=cased))
        assert token not in result.lower()
        assert "color: red;" in result


def test_script_tags_removed_any_case(sanitizer: CssSanitizer) -> None:
    for cased in _casings("script"):
        result = sanitizer.sanitize(f"<{cased}>alert(1)</{cased}>color: red;")
        assert "script" not in result.lower()
        assert result == "color: red;"


# --- Compiler ---


@pytest.mark.parametrize("css", ["a {", "} b", "color: red;", "x: y; z: w"])
def test_declarations_without_brace_pair(compiler: RuleCompiler, css: str) -> None:
    assert classify(css).value == "declarations"
    assert compiler.compile(css, TOKEN) == f"<style>#{TOKEN}, .{TOKEN} {{ {css} }}</style>"


@pytest.mark.parametrize("count", [1, 2, 5])
def test_duality(compiler: RuleCompiler, count: int) -> None:
    css = " ".join(f"& .c{i} {{ top: {i}px; }}" for i in range(count))
    result = compiler.compile(css, TOKEN)
    assert result.count(f"#{TOKEN}") == count
    assert result.count(f".{TOKEN}") == count
    assert result.count(TOKEN) == 2 * count


@pytest.mark.parametrize("breakpoint", BREAKPOINT_ORDER)
def test_media_wrapping(compiler: RuleCompiler, breakpoint: Breakpoint) -> None:
    for css in ("color: red;", "& { color: red; }"):
        result = compiler.compile(css, TOKEN, breakpoint)
        if breakpoint is Breakpoint.ALL:
            assert "@media" not in result
        else:
            assert result.count("@media") == 1


@pytest.mark.parametrize("breakpoint", BREAKPOINT_ORDER)
@pytest.mark.parametrize("token", ["abc123", "blockcss-0f", ""])
def test_empty_short_circuit(compiler: RuleCompiler, breakpoint: Breakpoint, token: str) -> None:
    assert compiler.compile("", token, breakpoint) == ""
    assert compiler.compile_preview("", token, breakpoint) == ""


# --- End to End ---


def test_example_declarations(sanitizer: CssSanitizer, compiler: RuleCompiler) -> None:
    result = compiler.compile(sanitizer.sanitize("color: red;"), TOKEN, Breakpoint.ALL)
    assert result == "<style>#abc123, .abc123 { color: red; }</style>"


def test_example_selector_block(sanitizer: CssSanitizer, compiler: RuleCompiler) -> None:
    raw = "& { padding: 10px; } &:hover { opacity: .5; }"
    result = compiler.compile(sanitizer.sanitize(raw), TOKEN, Breakpoint.MOBILE)
    assert result == (
        "<style>@media (max-width: 767px) { #abc123 { padding: 10px; } "
        "#abc123:hover { opacity: .5; } .abc123 { padding: 10px; } "
        ".abc123:hover { opacity: .5; } }</style>"
    )


def test_example_behavior(sanitizer: CssSanitizer) -> None:
    assert sanitizer.sanitize("behavior: url(evil.htc); color:blue;") == "color:blue;"
