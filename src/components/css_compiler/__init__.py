"""
CSS compiler component - Scoped, breakpoint-wrapped rules from block CSS.
"""

from ._impl import (
    BREAKPOINT_HELP,
    BREAKPOINT_LABELS,
    DEFAULT_CONFIG,
    MEDIA_QUERIES,
    CssShape,
    RuleCompiler,
    RuleCompilerConfig,
    classify,
    compile_css,
    css_escape,
    get_media_query,
    preview_selector,
    scope_rules,
    scope_selectors,
    wrap_media,
)
from .component import run, run_compile, run_compile_preview
from .models import CompileCssInput, CompileCssOutput, CompilePreviewCssInput
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_compile",
    "run_compile_preview",
    # Models
    "CompileCssInput",
    "CompilePreviewCssInput",
    "CompileCssOutput",
    # Ports
    "RulesPort",
    # Service
    "RuleCompiler",
    "RuleCompilerConfig",
    "DEFAULT_CONFIG",
    "CssShape",
    "MEDIA_QUERIES",
    "BREAKPOINT_LABELS",
    "BREAKPOINT_HELP",
    "classify",
    "compile_css",
    "css_escape",
    "get_media_query",
    "preview_selector",
    "scope_rules",
    "scope_selectors",
    "wrap_media",
]
