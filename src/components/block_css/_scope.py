"""
Scope attachment - marks the first element of a block's markup.

The wrapper ends up with exactly one way to be matched by the compiled
"#token" / ".token" selectors:
- no id: id="<token>" is added
- id but no class: class="<token>" is added
- id and class: <token> is appended to the class value
Only the first opening tag is touched.
"""

from __future__ import annotations

import html
import re

_OPEN_TAG = re.compile(r"(<([a-z][a-z0-9]*)\b)([^>]*)(>)", re.IGNORECASE)

# Whole attribute names only: data-id / data-class do not count.
_ID_ATTR = re.compile(r"(?<![\w-])id\s*=\s*[\"']", re.IGNORECASE)
_CLASS_ATTR = re.compile(r"(?<![\w-])class\s*=\s*([\"'])(.*?)\1", re.IGNORECASE | re.DOTALL)

_SELF_CLOSING = re.compile(r"(?:^|(?<=[\s\"']))/\s*$")


def _attach_to_attributes(attributes: str, token: str) -> str:
    closing = _SELF_CLOSING.search(attributes)
    if closing:
        body, tail = attributes[: closing.start()].rstrip(), " /"
    else:
        body, tail = attributes, ""

    if not _ID_ATTR.search(body):
        return f'{body} id="{token}"{tail}'

    class_match = _CLASS_ATTR.search(body)
    if class_match is None:
        return f'{body} class="{token}"{tail}'

    value = class_match.group(2)
    new_value = f"{value} {token}" if value.strip() else token
    return body[: class_match.start(2)] + new_value + body[class_match.end(2) :] + tail


def attach_scope(markup: str, scope_token: str) -> str:
    """Add the scope token to the first opening tag of the markup."""
    match = _OPEN_TAG.search(markup)
    if match is None:
        return markup

    attributes = _attach_to_attributes(match.group(3), html.escape(scope_token, quote=True))
    return markup[: match.start()] + match.group(1) + attributes + match.group(4) + markup[match.end() :]
