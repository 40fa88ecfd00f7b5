"""
Live Preview API Routes.

The editor posts a block instance's four CSS fields on every edit and gets
back the style-node text for that instance. The registry keeps one node per
instance, so each edit replaces the previous text.

Preview CSS is scoped with [data-block="<instance id>"], not the published
"#token" / ".token" pair; sanitizing, classification and media wrapping are
the same as on the published page.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from src.adapters.rules_port import RulesFileAdapter
from src.api.deps import get_block_css_renderer, get_preview_registry, get_rules_adapter
from src.components.block_css import (
    BlockCssRenderer,
    PreviewBlockCssInput,
    PreviewStyleRegistry,
    preview_wrapper_attrs,
    run_preview,
)
from src.components.css_compiler import BREAKPOINT_HELP, BREAKPOINT_LABELS, get_media_query
from src.domain.entities import BREAKPOINT_ORDER, Breakpoint, CssVariantSet

router = APIRouter()


# --- Request/Response Models ---


class PreviewCssRequest(BaseModel):
    """A block instance's CSS fields as currently edited."""

    instance_id: str = Field(..., min_length=1, description="Editor block instance id")
    css: CssVariantSet = Field(default_factory=CssVariantSet)
    wrapper_props: dict[str, Any] = Field(default_factory=dict)


class PreviewCssResponse(BaseModel):
    """Style-node text and editor hints for one instance."""

    instance_id: str
    css: str
    style_html: str | None
    active_variant: Breakpoint
    populated: dict[str, bool]
    wrapper_props: dict[str, Any]


class BreakpointInfo(BaseModel):
    name: Breakpoint
    label: str
    help: str
    media_query: str


# --- Routes ---


@router.post("/css", response_model=PreviewCssResponse)
def preview_css(
    request: PreviewCssRequest,
    renderer: BlockCssRenderer = Depends(get_block_css_renderer),
    registry: PreviewStyleRegistry = Depends(get_preview_registry),
    rules: RulesFileAdapter = Depends(get_rules_adapter),
) -> PreviewCssResponse:
    """Compile preview CSS for an instance and replace its style node."""
    result = run_preview(
        PreviewBlockCssInput(instance_id=request.instance_id, variants=request.css),
        renderer=renderer,
    )
    node = registry.put(request.instance_id, result.css)

    return PreviewCssResponse(
        instance_id=request.instance_id,
        css=node.css if node else "",
        style_html=node.to_html() if node else None,
        active_variant=result.active_variant,
        populated=result.populated,
        wrapper_props=preview_wrapper_attrs(
            request.instance_id,
            request.css,
            request.wrapper_props,
            attribute=rules.get_preview_attribute(),
        ),
    )


@router.delete("/css/{instance_id}")
def remove_preview_css(
    instance_id: str,
    registry: PreviewStyleRegistry = Depends(get_preview_registry),
) -> dict[str, Any]:
    """Drop an instance's style node (block deleted from the editor)."""
    return {"instance_id": instance_id, "removed": registry.remove(instance_id)}


@router.get("/head")
def preview_head(
    registry: PreviewStyleRegistry = Depends(get_preview_registry),
) -> dict[str, Any]:
    """All live style nodes, as they sit in the preview document head."""
    return {"html": registry.render_head(), "count": len(registry)}


@router.get("/breakpoints", response_model=list[BreakpointInfo])
def list_breakpoints() -> list[BreakpointInfo]:
    """The static breakpoint table, in processing order."""
    return [
        BreakpointInfo(
            name=bp,
            label=BREAKPOINT_LABELS[bp],
            help=BREAKPOINT_HELP[bp],
            media_query=get_media_query(bp),
        )
        for bp in BREAKPOINT_ORDER
    ]
