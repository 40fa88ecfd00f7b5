"""
CSS compiler component - Scoped rule generation.

Invariants:
- Empty input compiles to ""
- Both braces present -> selector block, otherwise bare declarations
- N placeholders compile to N "#token" and N ".token" occurrences
- "all" never emits @media; other breakpoints emit exactly one wrapper
"""

from __future__ import annotations

from ._impl import DEFAULT_CONFIG, CssShape, RuleCompiler, RuleCompilerConfig, classify
from .models import CompileCssInput, CompileCssOutput, CompilePreviewCssInput
from .ports import RulesPort


def _build_config(rules: RulesPort | None) -> RuleCompilerConfig:
    """Build compiler config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG

    return RuleCompilerConfig(
        placeholder=rules.get_placeholder(),
        preview_attribute=rules.get_preview_attribute(),
    )


def _shape_of(css: str) -> CssShape | None:
    css = css.strip()
    return classify(css) if css else None


# --- Component Entry Points ---


def run_compile(
    inp: CompileCssInput,
    *,
    rules: RulesPort | None = None,
) -> CompileCssOutput:
    """
    Compile sanitized CSS for a published block.

    Args:
        inp: Input containing sanitized CSS, scope token and breakpoint.
        rules: Optional rules port for configuration.

    Returns:
        CompileCssOutput with a <style> element (or "").
    """
    compiler = RuleCompiler(_build_config(rules))

    return CompileCssOutput(
        css=compiler.compile(inp.css, inp.scope_token, inp.breakpoint),
        shape=_shape_of(inp.css),
        success=True,
    )


def run_compile_preview(
    inp: CompilePreviewCssInput,
    *,
    rules: RulesPort | None = None,
) -> CompileCssOutput:
    """Compile sanitized CSS for the live preview."""
    compiler = RuleCompiler(_build_config(rules))

    return CompileCssOutput(
        css=compiler.compile_preview(inp.css, inp.instance_id, inp.breakpoint),
        shape=_shape_of(inp.css),
        success=True,
    )


def run(
    inp: CompileCssInput | CompilePreviewCssInput,
    *,
    rules: RulesPort | None = None,
) -> CompileCssOutput:
    """
    Main entry point for the css_compiler component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, CompileCssInput):
        return run_compile(inp, rules=rules)
    elif isinstance(inp, CompilePreviewCssInput):
        return run_compile_preview(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
