"""
CSS compiler component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import Breakpoint

from ._impl import CssShape

# --- Input Models ---


@dataclass(frozen=True)
class CompileCssInput:
    """Input for compiling sanitized CSS for a published block."""

    css: str
    scope_token: str
    breakpoint: Breakpoint = Breakpoint.ALL


@dataclass(frozen=True)
class CompilePreviewCssInput:
    """Input for compiling sanitized CSS for the live preview."""

    css: str
    instance_id: str
    breakpoint: Breakpoint = Breakpoint.ALL


# --- Output Models ---


@dataclass(frozen=True)
class CompileCssOutput:
    """Output for compiled CSS."""

    css: str
    shape: CssShape | None = None  # None when the input was empty
    success: bool = True
