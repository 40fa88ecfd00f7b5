import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.adapters.rules_port import RulesFileAdapter

# Components are stateless, so they are built here and injected.
from src.components.block_css import BlockCssRenderer, PreviewStyleRegistry, create_renderer
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(
            os.environ.get("BLOCKCSS_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )
        self.log_level = os.environ.get("BLOCKCSS_LOG_LEVEL", "INFO")


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def _load_rules(rules_path: Path) -> Rules:
    return load_rules(rules_path)


def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return _load_rules(settings.rules_path)


def get_rules_adapter(rules: Rules = Depends(get_rules)) -> RulesFileAdapter:
    return RulesFileAdapter(rules)


# --- Component Services ---
def get_block_css_renderer(
    rules: RulesFileAdapter = Depends(get_rules_adapter),
) -> BlockCssRenderer:
    """Get block CSS renderer."""
    return create_renderer(rules)


# Preview registry singleton: one style node per editor block instance
_preview_registry_instance: PreviewStyleRegistry | None = None


def get_preview_registry(
    renderer: BlockCssRenderer = Depends(get_block_css_renderer),
    rules: RulesFileAdapter = Depends(get_rules_adapter),
) -> PreviewStyleRegistry:
    """Get preview style registry singleton."""
    global _preview_registry_instance
    if _preview_registry_instance is None:
        _preview_registry_instance = PreviewStyleRegistry(
            renderer, style_attribute=rules.get_preview_style_attribute()
        )
    return _preview_registry_instance
