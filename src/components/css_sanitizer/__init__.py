"""
CSS sanitizer component - Deny-list filter for author-supplied block CSS.
"""

from ._impl import (
    DEFAULT_CONFIG,
    CssSanitizer,
    CssSanitizerConfig,
    sanitize_css,
    strip_markup,
)
from .component import run, run_sanitize
from .models import SanitizeCssInput, SanitizeCssOutput

__all__ = [
    # Entry points
    "run",
    "run_sanitize",
    # Models
    "SanitizeCssInput",
    "SanitizeCssOutput",
    # Service
    "CssSanitizer",
    "CssSanitizerConfig",
    "DEFAULT_CONFIG",
    "sanitize_css",
    "strip_markup",
]
