"""
CSS compiler component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for accessing compiler rules configuration."""

    def get_placeholder(self) -> str:
        """Get the token that stands for the block itself."""
        ...

    def get_preview_attribute(self) -> str:
        """Get the attribute that identifies a block in the live preview."""
        ...
