"""
RuleCompiler - Turns sanitized block CSS into scoped, breakpoint-wrapped rules.

Key behaviors:
- Text with both "{" and "}" is a selector block; anything else is a bare
  declaration list
- Selector blocks: the placeholder is replaced once per scope selector and
  the copies are joined with a single space
- Bare declarations: wrapped in one rule whose selector lists every scope
  selector
- Non-"all" breakpoints wrap the rule set in their media query
- Server output uses both "#token" and ".token" (the wrapper gets either an
  id or a class); the live preview uses one [data-block="..."] selector

The compiler assumes its input already went through CssSanitizer.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from src.components.css_sanitizer import strip_markup
from src.domain.entities import Breakpoint

# --- Breakpoint Table ---

MEDIA_QUERIES: dict[Breakpoint, str] = {
    Breakpoint.ALL: "",
    Breakpoint.MOBILE: "@media (max-width: 767px)",
    Breakpoint.TABLET: "@media (min-width: 768px) and (max-width: 1024px)",
    Breakpoint.DESKTOP: "@media (min-width: 1025px)",
}

BREAKPOINT_LABELS: dict[Breakpoint, str] = {
    Breakpoint.ALL: "All Devices",
    Breakpoint.MOBILE: "Mobile (max 767px)",
    Breakpoint.TABLET: "Tablet (768px - 1024px)",
    Breakpoint.DESKTOP: "Desktop (min 1025px)",
}

BREAKPOINT_HELP: dict[Breakpoint, str] = {
    Breakpoint.ALL: "CSS that applies to all screen sizes.",
    Breakpoint.MOBILE: "CSS for mobile devices (max 767px).",
    Breakpoint.TABLET: "CSS for tablets (768px - 1024px).",
    Breakpoint.DESKTOP: "CSS for desktop screens (min 1025px).",
}


class CssShape(str, Enum):
    """How author CSS is interpreted."""

    SELECTOR_BLOCK = "selector_block"
    DECLARATIONS = "declarations"


# --- Configuration ---


@dataclass(frozen=True)
class RuleCompilerConfig:
    """Rule compiler configuration."""

    placeholder: str = "&"
    preview_attribute: str = "data-block"


DEFAULT_CONFIG = RuleCompilerConfig()


# --- Pure Helpers ---


def classify(css: str) -> CssShape:
    """Selector block when both braces are present, declarations otherwise."""
    if "{" in css and "}" in css:
        return CssShape.SELECTOR_BLOCK
    return CssShape.DECLARATIONS


def get_media_query(breakpoint: Breakpoint | str) -> str:
    """Media query prelude for a breakpoint ("" for all)."""
    return MEDIA_QUERIES[Breakpoint(breakpoint)]


def wrap_media(rules: str, breakpoint: Breakpoint | str) -> str:
    media_query = get_media_query(breakpoint)
    if not media_query:
        return rules
    return f"{media_query} {{ {rules} }}"


# Markup characters become hex escapes, so a selector can never open or
# close a tag inside the <style> element that carries it.
_CSS_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "<": "\\3c ",
    ">": "\\3e ",
    "&": "\\26 ",
}


def css_escape(value: str) -> str:
    """Escape a value for use inside a selector."""
    return "".join(_CSS_ESCAPES.get(ch, ch) for ch in value)


def scope_selectors(scope_token: str) -> tuple[str, str]:
    """ID and class selectors for a published block."""
    escaped = css_escape(scope_token)
    return (f"#{escaped}", f".{escaped}")


def preview_selector(instance_id: str, attribute: str = "data-block") -> str:
    """Attribute selector for a block in the live preview."""
    return f'[{attribute}="{css_escape(instance_id)}"]'


def scope_rules(css: str, selectors: Sequence[str], placeholder: str = "&") -> str:
    """
    Scope trimmed, non-empty CSS to the given selectors.

    Selector blocks yield one full copy per selector; bare declarations
    yield a single rule with a comma-separated selector list.
    """
    if classify(css) is CssShape.SELECTOR_BLOCK:
        return " ".join(strip_markup(css.replace(placeholder, selector)) for selector in selectors)
    return f"{', '.join(selectors)} {{ {strip_markup(css)} }}"


# --- Rule Compiler ---


class RuleCompiler:
    """
    Stateless rule compiler shared by the server renderer and the preview.
    """

    def __init__(self, config: RuleCompilerConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def compile_rules(
        self,
        sanitized: str,
        selectors: Sequence[str],
        breakpoint: Breakpoint | str,
    ) -> str:
        """Scoped, media-wrapped rules without a style envelope."""
        css = sanitized.strip()
        if not css:
            return ""
        rules = scope_rules(css, selectors, self.config.placeholder)
        return wrap_media(rules, breakpoint)

    def compile(
        self,
        sanitized: str,
        scope_token: str,
        breakpoint: Breakpoint | str = Breakpoint.ALL,
    ) -> str:
        """
        Compile CSS for the published page.

        Returns "" for empty input, otherwise a <style> element.
        """
        rules = self.compile_rules(sanitized, scope_selectors(scope_token), breakpoint)
        if not rules:
            return ""
        return f"<style>{rules}</style>"

    def compile_preview(
        self,
        sanitized: str,
        instance_id: str,
        breakpoint: Breakpoint | str = Breakpoint.ALL,
    ) -> str:
        """
        Compile CSS for the live preview.

        Single placeholder pass against the preview attribute selector; the
        result is style-node text, so there is no <style> envelope.
        """
        selector = preview_selector(instance_id, self.config.preview_attribute)
        return self.compile_rules(sanitized, (selector,), breakpoint)


def compile_css(
    sanitized: str,
    scope_token: str,
    breakpoint: Breakpoint | str = Breakpoint.ALL,
    config: RuleCompilerConfig | None = None,
) -> str:
    """Compile CSS with a throwaway compiler."""
    return RuleCompiler(config).compile(sanitized, scope_token, breakpoint)
