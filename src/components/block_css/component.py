"""
Block CSS component - Custom CSS per block instance.

Wires CssSanitizer and RuleCompiler into the render pipeline and the live
preview.

Invariants:
- Variants are processed in the order all, mobile, tablet, desktop
- A block without CSS renders unchanged, with no scope token
- Only the block's first element receives the scope token
- Preview and published output share sanitizing, classification and media
  wrapping
"""

from __future__ import annotations

from src.components.css_compiler import RuleCompiler, RuleCompilerConfig
from src.components.css_sanitizer import CssSanitizer

from ._impl import BlockCssRenderer
from ._preview import initial_variant
from .models import (
    PreviewBlockCssInput,
    PreviewBlockCssOutput,
    RenderBlockCssInput,
    RenderBlockCssOutput,
)
from .ports import RulesPort


def create_renderer(rules: RulesPort | None = None) -> BlockCssRenderer:
    """Build a renderer from the rules port (defaults when None)."""
    if rules is None:
        return BlockCssRenderer()

    compiler = RuleCompiler(
        RuleCompilerConfig(
            placeholder=rules.get_placeholder(),
            preview_attribute=rules.get_preview_attribute(),
        )
    )
    return BlockCssRenderer(
        sanitizer=CssSanitizer(),
        compiler=compiler,
        attribute_prefix=rules.get_attribute_prefix(),
        scope_token_prefix=rules.get_scope_token_prefix(),
    )


# --- Component Entry Points ---


def run_render(
    inp: RenderBlockCssInput,
    *,
    renderer: BlockCssRenderer | None = None,
) -> RenderBlockCssOutput:
    """
    Render a published block with its custom CSS.

    Args:
        inp: Input containing the block.
        renderer: Optional renderer (default configuration otherwise).

    Returns:
        RenderBlockCssOutput with the styled markup.
    """
    renderer = renderer or BlockCssRenderer()
    rendered = renderer.render(inp.block)

    return RenderBlockCssOutput(
        html=rendered.html,
        styles=rendered.styles,
        scope_token=rendered.scope_token,
        success=True,
    )


def run_preview(
    inp: PreviewBlockCssInput,
    *,
    renderer: BlockCssRenderer | None = None,
) -> PreviewBlockCssOutput:
    """
    Compile a block's CSS for the live preview.

    Args:
        inp: Input containing the instance id and the four fields.
        renderer: Optional renderer (default configuration otherwise).

    Returns:
        PreviewBlockCssOutput with the style-node text.
    """
    renderer = renderer or BlockCssRenderer()

    return PreviewBlockCssOutput(
        css=renderer.preview_css(inp.instance_id, inp.variants),
        active_variant=initial_variant(inp.variants),
        populated=inp.variants.populated(),
        success=True,
    )


def run(
    inp: RenderBlockCssInput | PreviewBlockCssInput,
    *,
    renderer: BlockCssRenderer | None = None,
) -> RenderBlockCssOutput | PreviewBlockCssOutput:
    """
    Main entry point for the block_css component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, RenderBlockCssInput):
        return run_render(inp, renderer=renderer)
    elif isinstance(inp, PreviewBlockCssInput):
        return run_preview(inp, renderer=renderer)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
