from src.rules.models import BlockCssRules, Rules


class RulesFileAdapter:
    """Serves the block_css / css_compiler rules ports from a loaded rules file."""

    def __init__(self, rules: Rules) -> None:
        self._block_css: BlockCssRules = rules.block_css

    def get_attribute_prefix(self) -> str:
        return self._block_css.attribute_prefix

    def get_scope_token_prefix(self) -> str:
        return self._block_css.scope_token_prefix

    def get_placeholder(self) -> str:
        return self._block_css.placeholder

    def get_preview_attribute(self) -> str:
        return self._block_css.preview_attribute

    def get_preview_style_attribute(self) -> str:
        return self._block_css.preview_style_attribute
