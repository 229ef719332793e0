"""Formatting helpers shared by all renderers."""

import json
from typing import Any

NO_DESCRIPTION = "no description"


def pretty_json(data: Any) -> str:
    """Two-space indented JSON, non-ASCII text kept as is."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def fenced(content: str, language: str) -> str:
    return f"```{language}\n{content}\n```"


def json_block(data: Any) -> str:
    return fenced(pretty_json(data), "json") + "\n"


def table_cell(text: str) -> str:
    """Keep a value on one table row."""
    return text.replace("|", "\\|").replace("\r", " ").replace("\n", " ")
