"""
Block CSS component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.domain.entities import Block, Breakpoint, CssVariantSet

# --- Input Models ---


@dataclass(frozen=True)
class RenderBlockCssInput:
    """Input for rendering a published block with its custom CSS."""

    block: Block


@dataclass(frozen=True)
class PreviewBlockCssInput:
    """Input for compiling a block's CSS for the live preview."""

    instance_id: str
    variants: CssVariantSet


# --- Output Models ---


@dataclass(frozen=True)
class RenderBlockCssOutput:
    """Output for a rendered block."""

    html: str
    styles: list[str] = field(default_factory=list)
    scope_token: str | None = None
    success: bool = True


@dataclass(frozen=True)
class PreviewBlockCssOutput:
    """Output for live-preview CSS."""

    css: str
    active_variant: Breakpoint = Breakpoint.ALL
    populated: dict[str, bool] = field(default_factory=dict)
    success: bool = True
