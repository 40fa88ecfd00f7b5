from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# --- Enums ---


class Breakpoint(str, Enum):
    """Responsive condition a CSS variant is restricted to."""

    ALL = "all"
    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"


# Processing order is also cascade order: later variants win ties.
BREAKPOINT_ORDER: tuple[Breakpoint, ...] = (
    Breakpoint.ALL,
    Breakpoint.MOBILE,
    Breakpoint.TABLET,
    Breakpoint.DESKTOP,
)

DEFAULT_ATTRIBUTE_PREFIX = "blockCss_"

# --- Block CSS ---

class CssVariantSet(BaseModel):
    """The four raw CSS fields owned by one block instance."""

    model_config = ConfigDict(frozen=True)

    all: str = ""
    mobile: str = ""
    tablet: str = ""
    desktop: str = ""

    def get(self, breakpoint: Breakpoint) -> str:
        return getattr(self, breakpoint.value)

    def items(self) -> list[tuple[Breakpoint, str]]:
        """Variants in processing order."""
        return [(bp, self.get(bp)) for bp in BREAKPOINT_ORDER]

    def is_empty(self) -> bool:
        return not any(text for _, text in self.items())

    def populated(self) -> dict[str, bool]:
        """Per-variant flag: True when the field holds non-blank text."""
        return {bp.value: bool(text.strip()) for bp, text in self.items()}

    @classmethod
    def from_attrs(
        cls, attrs: dict[str, Any], prefix: str = DEFAULT_ATTRIBUTE_PREFIX
    ) -> "CssVariantSet":
        """Read the four fields out of a host attribute bag; missing or non-string values are empty."""
        values: dict[str, str] = {}
        for bp in BREAKPOINT_ORDER:
            value = attrs.get(f"{prefix}{bp.value}", "")
            values[bp.value] = value if isinstance(value, str) else ""
        return cls(**values)


class Block(BaseModel):
    """A block instance as handed over by the render pipeline."""

    block_type: str
    attrs: dict[str, Any] = Field(default_factory=dict)
    html: str = ""  # Rendered markup
