"""Export helpers: styling-free text and JSON-ready dicts for parsed documents"""

import re
from typing import Any, Callable

from streammd.core.models import Document, runs_text


# Source-text stripper used for quick exports; order matters (code before inline code).
STRIP_RULES: list[tuple[re.Pattern, str]] = [
    (re.compile(r"#{1,6}\s"),                   ""),
    (re.compile(r"\*{1,3}([^*]+)\*{1,3}"),      r"\1"),
    (re.compile(r"_{1,3}([^_]+)_{1,3}"),        r"\1"),
    (re.compile(r"^[ \t]*[-*+][ \t]", re.M),    "• "),
    (re.compile(r"^[ \t]*[0-9]+\.[ \t]", re.M), ""),
    (re.compile(r"```[^`]*```"),                "[code block]"),
    (re.compile(r"`([^`]+)`"),                  r"\1"),
]


def strip_markdown(text: str) -> str:
    """Remove markup from raw text by regex substitution, without parsing it."""
    for pattern, repl in STRIP_RULES:
        text = pattern.sub(repl, text)
    return text


BLOCK_RENDERERS: dict[str, Callable[[Any], str]] = {
    "heading":   lambda b: runs_text(b.runs),
    "bullet":    lambda b: f"{'  ' * b.depth}• {runs_text(b.runs)}",
    "numbered":  lambda b: f"{b.number}. {runs_text(b.runs)}",
    "paragraph": lambda b: runs_text(b.runs),
    "code":      lambda b: b.raw,
    "quote":     lambda b: runs_text(b.runs),
    "divider":   lambda b: "---",
    "blank":     lambda b: "",
}


def to_plain_text(document: Document) -> str:
    """Render a parsed document one line group per block, with all inline delimiters dropped."""
    return "\n".join(BLOCK_RENDERERS[b.kind](b) for b in document.blocks)


def to_dict(document: Document) -> dict[str, Any]:
    """Return the JSON-compatible form of a document (enums as their string values)."""
    return document.model_dump(mode="json")
