"""
Block Render API Routes.

Server-side render hook: block markup in, markup with its scoped custom CSS
out.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from src.api.deps import get_block_css_renderer
from src.components.block_css import BlockCssRenderer, RenderBlockCssInput, run_render
from src.domain.entities import Block

logger = logging.getLogger(__name__)

router = APIRouter()


# --- Request/Response Models ---


class BlockRenderRequest(BaseModel):
    """A rendered block and its attribute bag."""

    block_type: str = Field(..., description="Block type name, e.g. core/paragraph")
    attrs: dict[str, Any] = Field(default_factory=dict, description="Block attributes")
    html: str = Field(default="", description="Rendered block markup")

    def to_block(self) -> Block:
        return Block(block_type=self.block_type, attrs=self.attrs, html=self.html)


class BlockRenderResponse(BaseModel):
    """Block markup with its style elements prepended."""

    html: str
    styles: list[str]
    scope_token: str | None


class PageRenderRequest(BaseModel):
    """Blocks in document order."""

    blocks: list[BlockRenderRequest]


class PageRenderResponse(BaseModel):
    html: str
    blocks: list[BlockRenderResponse]


# --- Routes ---


@router.post("/render", response_model=BlockRenderResponse)
def render_block(
    request: BlockRenderRequest,
    renderer: BlockCssRenderer = Depends(get_block_css_renderer),
) -> BlockRenderResponse:
    """Render one block with its custom CSS."""
    result = run_render(RenderBlockCssInput(block=request.to_block()), renderer=renderer)

    return BlockRenderResponse(
        html=result.html,
        styles=result.styles,
        scope_token=result.scope_token,
    )


@router.post("/render/page", response_model=PageRenderResponse)
def render_page(
    request: PageRenderRequest,
    renderer: BlockCssRenderer = Depends(get_block_css_renderer),
) -> PageRenderResponse:
    """
    Render a sequence of blocks.

    Blocks are rendered one at a time in the order given; each block's styles
    sit directly in front of its own markup.
    """
    rendered: list[BlockRenderResponse] = []
    for block_request in request.blocks:
        result = run_render(RenderBlockCssInput(block=block_request.to_block()), renderer=renderer)
        rendered.append(
            BlockRenderResponse(
                html=result.html,
                styles=result.styles,
                scope_token=result.scope_token,
            )
        )

    logger.info(
        "Rendered %d block(s), %d with custom CSS",
        len(rendered),
        sum(1 for r in rendered if r.scope_token),
    )
    return PageRenderResponse(html="".join(r.html for r in rendered), blocks=rendered)
