"""
CssSanitizer - Deny-list filter for author-supplied block CSS.

Strips executable content out of raw CSS text before it is compiled into
scoped rules. This is not a CSS validator: anything not on the deny list
passes through unchanged.

Key behaviors:
- Strips HTML markup (script/style elements with their body, then all tags)
- Removes javascript:, vbscript: and data:text/html
- Removes @import so no third-party stylesheet can be pulled in
- Removes behavior / -moz-binding declarations and expression( calls
- Repeats until stable, so nested tokens cannot reassemble after a removal
- Pure and total: never raises, worst case returns ""
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

# --- Configuration ---


@dataclass(frozen=True)
class CssSanitizerConfig:
    """Deny-list configuration."""

    # Removed wherever they appear, case-insensitively
    forbid_tokens: tuple[str, ...] = field(
        default_factory=lambda: (
            "javascript:",
            "vbscript:",
            "data:text/html",
        )
    )

    # Properties whose whole declaration is removed (name, value, ";")
    forbid_properties: tuple[str, ...] = field(
        default_factory=lambda: (
            "behavior",
            "-moz-binding",
        )
    )

    # Function names whose opening "name(" is removed
    forbid_functions: tuple[str, ...] = field(default_factory=lambda: ("expression",))

    strip_imports: bool = True


DEFAULT_CONFIG = CssSanitizerConfig()


# --- Markup Stripping ---

_SCRIPT_STYLE_ELEMENT = re.compile(
    r"<(script|style)\b[^>]*>.*?</\1\s*>",
    re.IGNORECASE | re.DOTALL,
)
_SCRIPT_FRAGMENT = re.compile(r"<script[^>]*>.*?</script>", re.IGNORECASE | re.DOTALL)

# A tag starts with "<" followed by a name, "/", "!" or "?". An unterminated
# tag runs to the end of the text. A lone "<" (e.g. "a < b") is left alone.
_TAG = re.compile(r"<[a-zA-Z/!?][^>]*(?:>|$)")


def strip_markup(text: str) -> str:
    """Remove HTML tags, dropping script/style elements together with their body."""
    text = _SCRIPT_STYLE_ELEMENT.sub("", text)
    return _TAG.sub("", text)


# --- Sanitizer ---


class CssSanitizer:
    """
    Stateless CSS sanitizer.

    One instance can be shared by every call site; it holds only the
    compiled deny-list patterns.
    """

    def __init__(self, config: CssSanitizerConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._patterns = self._compile_patterns(self.config)

    @staticmethod
    def _compile_patterns(config: CssSanitizerConfig) -> list[re.Pattern[str]]:
        patterns: list[re.Pattern[str]] = [_SCRIPT_FRAGMENT]

        for token in config.forbid_tokens:
            patterns.append(re.compile(re.escape(token), re.IGNORECASE))

        if config.strip_imports:
            patterns.append(re.compile(r"@import\s*", re.IGNORECASE))

        for prop in config.forbid_properties:
            # Vendor/compound names ending in the property (scroll-behavior) go too.
            patterns.append(
                re.compile(
                    r"[\w-]*" + re.escape(prop) + r"\s*:[^;{}]*;?\s*",
                    re.IGNORECASE,
                )
            )

        for func in config.forbid_functions:
            patterns.append(re.compile(re.escape(func) + r"\s*\(", re.IGNORECASE))

        return patterns

    def _single_pass(self, css: str) -> str:
        css = strip_markup(css)
        for pattern in self._patterns:
            css = pattern.sub("", css)
        return css.strip()

    def sanitize(self, css: str) -> str:
        """
        Sanitize raw CSS text.

        Every pass only deletes characters, so the loop terminates; it stops
        at the first pass that changes nothing.
        """
        if not css:
            return ""

        previous = None
        result = css
        while result != previous:
            previous = result
            result = self._single_pass(result)

        if result != css.strip():
            logger.debug(
                "Removed forbidden content from CSS (%d -> %d chars)",
                len(css),
                len(result),
            )
        return result


def sanitize_css(css: str, config: CssSanitizerConfig | None = None) -> str:
    """Sanitize CSS with a throwaway sanitizer."""
    return CssSanitizer(config).sanitize(css)
