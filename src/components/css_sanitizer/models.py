"""
CSS sanitizer component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

# --- Input Models ---


@dataclass(frozen=True)
class SanitizeCssInput:
    """Input for sanitizing one raw CSS field."""

    css: str


# --- Output Models ---


@dataclass(frozen=True)
class SanitizeCssOutput:
    """Output for sanitized CSS."""

    css: str
    changed: bool = False
    success: bool = True
