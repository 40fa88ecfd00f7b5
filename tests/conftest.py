from pathlib import Path

import pytest

from src.adapters.rules_port import RulesFileAdapter
from src.components.block_css import BlockCssRenderer, PreviewStyleRegistry, create_renderer
from src.rules.loader import load_rules
from src.rules.models import ProjectRules, Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_rules_path() -> Path:
    """The rules.yaml shipped at the project root."""
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def rules(project_rules_path: Path) -> Rules:
    return load_rules(project_rules_path)


@pytest.fixture
def default_rules() -> Rules:
    """Rules with every block_css setting at its default."""
    return Rules(project=ProjectRules(slug="block-css", rules_version="1.0"))


@pytest.fixture
def renderer(rules: Rules) -> BlockCssRenderer:
    return create_renderer(RulesFileAdapter(rules))


@pytest.fixture
def preview_registry(renderer: BlockCssRenderer) -> PreviewStyleRegistry:
    return PreviewStyleRegistry(renderer)
