"""Text output helpers: plain-text card sides and JSON payloads.

Rendered card sides (``question``/``answer`` from ``cardsInfo``) carry the note
type's CSS, wrapper markup and sound directives. Clients only need the text,
with line structure kept.
"""

from __future__ import annotations

import json
import re
from typing import Any

from pydantic import BaseModel

_STYLE_BLOCK = re.compile(r"<style[^>]*>[\s\S]*?</style>", re.IGNORECASE)
_DIV_OPEN = re.compile(r"<div[^>]*>")
_ANY_TAG = re.compile(r"<[^>]+>")
_PLAY_DIRECTIVE = re.compile(r"\[anki:play:[^\]]+\]")

# Decoded in this order, so "&amp;lt;" ends up as "<".
_ENTITIES = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
)


def clean_card_html(text: str) -> str:
    """Reduce rendered card HTML to trimmed, non-empty lines of text.

    Args:
        text: Card side as rendered by Anki

    Returns:
        Plain text; empty string if nothing visible remains

    Example:
        >>> clean_card_html("<style>.card{}</style>Capital of <b>France</b>?<div>[sound]</div>")
        'Capital of  France ?\\n[sound]'
    """
    text = _STYLE_BLOCK.sub("", text)
    text = _DIV_OPEN.sub("\n", text)
    text = _ANY_TAG.sub(" ", text)
    text = _PLAY_DIRECTIVE.sub("", text)

    for entity, char in _ENTITIES:
        text = text.replace(entity, char)

    lines = (line.strip() for line in text.split("\n"))
    return "\n".join(line for line in lines if line)


def to_json(value: Any, indent: int | None = None) -> str:
    """Serialize a tool or resource payload.

    Pydantic models are dumped by alias so cards keep their ``cardId`` key.
    Without ``indent`` the output is compact.

    Args:
        value: JSON-compatible value, model, or list of models
        indent: Indentation for pretty output

    Returns:
        JSON text
    """
    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=True)
    elif isinstance(value, list):
        value = [v.model_dump(by_alias=True) if isinstance(v, BaseModel) else v for v in value]

    separators = None if indent is not None else (",", ":")
    return json.dumps(value, indent=indent, separators=separators, ensure_ascii=False)
