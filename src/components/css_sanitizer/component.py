"""
CSS sanitizer component - Deny-list filter for block CSS.

Invariants:
- Output never contains HTML tags
- Output never contains a forbidden token, in any letter case
- sanitize(sanitize(x)) == sanitize(x)
- Never raises
"""

from __future__ import annotations

from ._impl import CssSanitizer
from .models import SanitizeCssInput, SanitizeCssOutput

# --- Component Entry Points ---


def run_sanitize(
    inp: SanitizeCssInput,
    *,
    sanitizer: CssSanitizer | None = None,
) -> SanitizeCssOutput:
    """
    Sanitize one raw CSS field.

    Args:
        inp: Input containing the raw CSS.
        sanitizer: Optional sanitizer instance (default deny list otherwise).

    Returns:
        SanitizeCssOutput with the cleaned CSS.
    """
    sanitizer = sanitizer or CssSanitizer()
    css = sanitizer.sanitize(inp.css)

    return SanitizeCssOutput(
        css=css,
        changed=css != inp.css.strip(),
        success=True,
    )


def run(
    inp: SanitizeCssInput,
    *,
    sanitizer: CssSanitizer | None = None,
) -> SanitizeCssOutput:
    """Main entry point for the css_sanitizer component."""
    if isinstance(inp, SanitizeCssInput):
        return run_sanitize(inp, sanitizer=sanitizer)
    raise ValueError(f"Unknown input type: {type(inp)}")
