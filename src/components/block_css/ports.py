"""
Block CSS component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for accessing block CSS rules configuration."""

    def get_attribute_prefix(self) -> str:
        """Get the prefix of the four CSS attribute names."""
        ...

    def get_scope_token_prefix(self) -> str:
        """Get the prefix of generated scope tokens."""
        ...

    def get_placeholder(self) -> str:
        """Get the token that stands for the block itself."""
        ...

    def get_preview_attribute(self) -> str:
        """Get the attribute that identifies a block in the live preview."""
        ...

    def get_preview_style_attribute(self) -> str:
        """Get the attribute that tags a preview style node."""
        ...
