from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class BlockCssRules(BaseModel):
    # Host attribute names are "<attribute_prefix><variant>", e.g. blockCss_mobile
    attribute_prefix: str = "blockCss_"
    # Used verbatim in "#<token>" / ".<token>" selectors, so it must be a plain CSS identifier
    scope_token_prefix: str = Field(default="blockcss-", pattern=r"^[A-Za-z_-][\w-]*$")
    placeholder: str = Field(default="&", min_length=1)
    preview_attribute: str = "data-block"
    preview_style_attribute: str = "data-blockcss-block"

class ApiRules(BaseModel):
    cors_origins: list[str] = Field(default_factory=list)

class Rules(BaseModel):
    project: ProjectRules
    block_css: BlockCssRules = Field(default_factory=BlockCssRules)
    api: ApiRules = Field(default_factory=ApiRules)
