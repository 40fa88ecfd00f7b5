"""
BlockCssRenderer - Per-block orchestration of sanitize + compile.

Server side: derives the block's scope token, compiles the four variants in
fixed order (all, mobile, tablet, desktop), tags the block's first element
with the token and prepends the <style> elements.

Live preview: the same sanitize/classify/media logic, scoped to
[data-block="<instance id>"] with a single placeholder pass and no <style>
envelope.

Key behaviors:
- Variant order is cascade order
- Empty variants are skipped independently of each other
- A block with no CSS is returned untouched and no token is computed
"""

from __future__ import annotations

import hashlib
import json
import logging
from dataclasses import dataclass, field

from src.components.css_compiler import RuleCompiler
from src.components.css_sanitizer import CssSanitizer
from src.domain.entities import DEFAULT_ATTRIBUTE_PREFIX, Block, CssVariantSet

from ._scope import attach_scope

logger = logging.getLogger(__name__)

DEFAULT_SCOPE_TOKEN_PREFIX = "blockcss-"


# --- Result Models ---


@dataclass
class RenderedBlock:
    """Block markup with its compiled styles prepended."""

    html: str
    styles: list[str] = field(default_factory=list)
    scope_token: str | None = None


# --- Scope Token ---


def derive_scope_token(block: Block, prefix: str = DEFAULT_SCOPE_TOKEN_PREFIX) -> str:
    """
    Deterministic per-instance token from the block's attributes and markup.

    Two blocks collide only when both are byte-identical.
    """
    payload = json.dumps(block.attrs, separators=(",", ":"), default=str) + json.dumps(
        block.model_dump(mode="json"), separators=(",", ":"), default=str
    )
    return prefix + hashlib.md5(payload.encode("utf-8")).hexdigest()


# --- Renderer ---


class BlockCssRenderer:
    """
    Applies block CSS at render time and for the live preview.

    The sanitizer and compiler are stateless and injected, so the two call
    sites share one deny list and one classification/media logic.
    """

    def __init__(
        self,
        sanitizer: CssSanitizer | None = None,
        compiler: RuleCompiler | None = None,
        attribute_prefix: str = DEFAULT_ATTRIBUTE_PREFIX,
        scope_token_prefix: str = DEFAULT_SCOPE_TOKEN_PREFIX,
    ) -> None:
        self.sanitizer = sanitizer or CssSanitizer()
        self.compiler = compiler or RuleCompiler()
        self.attribute_prefix = attribute_prefix
        self.scope_token_prefix = scope_token_prefix

    def variants_of(self, block: Block) -> CssVariantSet:
        return CssVariantSet.from_attrs(block.attrs, self.attribute_prefix)

    def compile_variants(self, variants: CssVariantSet, scope_token: str) -> list[str]:
        """One <style> element per variant that survives sanitizing, in order."""
        styles: list[str] = []
        for breakpoint, raw in variants.items():
            if not raw:
                continue
            sanitized = self.sanitizer.sanitize(raw)
            if not sanitized:
                continue
            styles.append(self.compiler.compile(sanitized, scope_token, breakpoint))
        return styles

    def render(self, block: Block) -> RenderedBlock:
        """Render a block's CSS in front of its markup."""
        variants = self.variants_of(block)
        if variants.is_empty() or not block.html:
            return RenderedBlock(html=block.html)

        scope_token = derive_scope_token(block, self.scope_token_prefix)
        styles = self.compile_variants(variants, scope_token)
        if not styles:
            logger.debug("Block %s: CSS sanitized to nothing", block.block_type)
            return RenderedBlock(html=block.html)

        logger.debug(
            "Block %s: %d style(s) scoped to %s", block.block_type, len(styles), scope_token
        )
        return RenderedBlock(
            html="".join(styles) + attach_scope(block.html, scope_token),
            styles=styles,
            scope_token=scope_token,
        )

    def render_html(self, block: Block) -> str:
        """Render-pipeline hook: markup in, markup out."""
        return self.render(block).html

    def preview_css(self, instance_id: str, variants: CssVariantSet) -> str:
        """Style-node text for one block instance in the live preview."""
        parts: list[str] = []
        for breakpoint, raw in variants.items():
            if not raw:
                continue
            sanitized = self.sanitizer.sanitize(raw)
            if not sanitized:
                continue
            parts.append(self.compiler.compile_preview(sanitized, instance_id, breakpoint))
        return "".join(parts)
