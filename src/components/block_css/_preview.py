"""
Live-preview style ownership.

Each block instance owns at most one style node, tagged with its instance
id. Re-applying replaces the node's text; an instance whose fields compile
to nothing, or that is deleted, loses its node.
"""

from __future__ import annotations

import html
import threading
from dataclasses import dataclass
from typing import Any

from src.domain.entities import BREAKPOINT_ORDER, Breakpoint, CssVariantSet

from ._impl import BlockCssRenderer

DEFAULT_STYLE_ATTRIBUTE = "data-blockcss-block"


@dataclass(frozen=True)
class StyleNode:
    """A preview <style> node owned by one block instance."""

    instance_id: str
    css: str
    attribute: str = DEFAULT_STYLE_ATTRIBUTE

    def to_html(self) -> str:
        return f'<style {self.attribute}="{html.escape(self.instance_id, quote=True)}">{self.css}</style>'


class PreviewStyleRegistry:
    """Per-instance preview styles, as they would sit in the document head."""

    def __init__(
        self,
        renderer: BlockCssRenderer,
        style_attribute: str = DEFAULT_STYLE_ATTRIBUTE,
    ) -> None:
        self._renderer = renderer
        self._style_attribute = style_attribute
        self._nodes: dict[str, StyleNode] = {}
        self._lock = threading.Lock()

    def apply(self, instance_id: str, variants: CssVariantSet) -> StyleNode | None:
        """Recompile an instance's CSS, replacing (or dropping) its node."""
        return self.put(instance_id, self._renderer.preview_css(instance_id, variants))

    def put(self, instance_id: str, css: str) -> StyleNode | None:
        """Store already compiled preview CSS; empty text drops the node."""
        with self._lock:
            if not css:
                self._nodes.pop(instance_id, None)
                return None
            node = StyleNode(instance_id=instance_id, css=css, attribute=self._style_attribute)
            self._nodes[instance_id] = node
            return node

    def remove(self, instance_id: str) -> bool:
        """Drop an instance's node; True if there was one."""
        with self._lock:
            return self._nodes.pop(instance_id, None) is not None

    def get(self, instance_id: str) -> StyleNode | None:
        with self._lock:
            return self._nodes.get(instance_id)

    def nodes(self) -> list[StyleNode]:
        with self._lock:
            return list(self._nodes.values())

    def render_head(self) -> str:
        return "".join(node.to_html() for node in self.nodes())

    def __len__(self) -> int:
        with self._lock:
            return len(self._nodes)


def initial_variant(variants: CssVariantSet) -> Breakpoint:
    """First variant holding CSS, in processing order; "all" when none does."""
    populated = variants.populated()
    for breakpoint in BREAKPOINT_ORDER:
        if populated[breakpoint.value]:
            return breakpoint
    return Breakpoint.ALL


def preview_wrapper_attrs(
    instance_id: str,
    variants: CssVariantSet,
    wrapper_props: dict[str, Any] | None = None,
    attribute: str = "data-block",
) -> dict[str, Any]:
    """Wrapper attributes for a preview block; tagged only when it has CSS."""
    props = dict(wrapper_props or {})
    if any(variants.populated().values()):
        props[attribute] = instance_id
    return props
