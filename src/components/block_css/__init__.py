"""
Block CSS component - Scoped custom CSS for individual content blocks.
"""

from ._impl import (
    DEFAULT_SCOPE_TOKEN_PREFIX,
    BlockCssRenderer,
    RenderedBlock,
    derive_scope_token,
)
from ._preview import (
    PreviewStyleRegistry,
    StyleNode,
    initial_variant,
    preview_wrapper_attrs,
)
from ._scope import attach_scope
from .component import create_renderer, run, run_preview, run_render
from .models import (
    PreviewBlockCssInput,
    PreviewBlockCssOutput,
    RenderBlockCssInput,
    RenderBlockCssOutput,
)
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_render",
    "run_preview",
    "create_renderer",
    # Input models
    "RenderBlockCssInput",
    "PreviewBlockCssInput",
    # Output models
    "RenderBlockCssOutput",
    "PreviewBlockCssOutput",
    # Ports
    "RulesPort",
    # Services
    "BlockCssRenderer",
    "RenderedBlock",
    "PreviewStyleRegistry",
    "StyleNode",
    "DEFAULT_SCOPE_TOKEN_PREFIX",
    "attach_scope",
    "derive_scope_token",
    "initial_variant",
    "preview_wrapper_attrs",
]
