"""Block segmenter: group input lines into typed blocks, first matching rule wins"""

import re

from streammd.core.inline import tokenize
from streammd.core.models import (
    BlankMarker, Block, Blockquote, BulletItem, CodeBlock,
    Divider, Heading, NumberedItem, Paragraph,
)


FENCE = "```"
DIVIDERS = frozenset({"---", "***", "___"})
HEADING_MARKERS = (("### ", 3), ("## ", 2), ("# ", 1))   # longest first
QUOTE_MARKER = "> "
BULLET_MARKERS = ("- ", "* ", "• ")
INTEGER_RE = re.compile(r"[+-]?[0-9]+")
INT64_MIN, INT64_MAX = -(2 ** 63), 2 ** 63 - 1
INT64_DIGITS = 19


def _heading(trimmed: str) -> tuple[int, str] | None:
    """Return (level, content) for a '#'/'##'/'###' line, else None."""
    for marker, level in HEADING_MARKERS:
        if trimmed.startswith(marker):
            return level, trimmed[len(marker):]
    return None


def _numbered(trimmed: str) -> tuple[int, str] | None:
    """Return (number, content) when the text before the first '.' is an integer.

    Deliberately permissive: '3.14 is pi' is item 3 with content '14 is pi'.
    Numbers outside the signed 64-bit range are not list numbers.
    """
    head, dot, tail = trimmed.partition(".")
    if not (dot and INTEGER_RE.fullmatch(head)):
        return None
    if len(head.lstrip("+-").lstrip("0")) > INT64_DIGITS:
        return None
    number = int(head)
    if not INT64_MIN <= number <= INT64_MAX:
        return None
    return number, tail.strip()


def classify(trimmed: str) -> str | None:
    """Return the block kind a trimmed line opens, or None for paragraph text."""
    if trimmed.startswith(FENCE):
        return "code"
    if trimmed in DIVIDERS:
        return "divider"
    if _heading(trimmed):
        return "heading"
    if trimmed.startswith(QUOTE_MARKER):
        return "quote"
    if trimmed.startswith(BULLET_MARKERS):
        return "bullet"
    if _numbered(trimmed):
        return "numbered"
    if not trimmed:
        return "blank"
    return None


def _read_fence(lines: list[str], i: int) -> tuple[CodeBlock, int]:
    """Collect raw lines from i up to the closing fence; an unclosed fence runs to the end."""
    start = i
    while i < len(lines) and not lines[i].strip().startswith(FENCE):
        i += 1
    block = CodeBlock(raw="\n".join(lines[start:i]))
    return block, i + 1   # skip the closer (or step past the end)


def _leading_spaces(raw: str) -> int:
    return len(raw) - len(raw.lstrip(" "))


def segment(text: str, coalesce: bool = True) -> list[Block]:
    """Split text on newlines and return its ordered block sequence. Never fails.

    Every line is consumed by exactly one block. Blank lines collapse only when
    adjacent; fence lines are dropped; paragraph lines are joined with one space.
    """
    lines = text.split("\n")
    blocks: list[Block] = []
    i = 0

    while i < len(lines):
        raw = lines[i]
        trimmed = raw.strip()
        kind = classify(trimmed)

        if kind == "code":
            block, i = _read_fence(lines, i + 1)
            blocks.append(block)
            continue

        i += 1
        if kind == "divider":
            blocks.append(Divider())
        elif kind == "heading":
            level, content = _heading(trimmed)
            blocks.append(Heading(level=level, runs=tokenize(content, coalesce)))
        elif kind == "quote":
            blocks.append(Blockquote(runs=tokenize(trimmed[len(QUOTE_MARKER):], coalesce)))
        elif kind == "bullet":
            blocks.append(BulletItem(
                depth=_leading_spaces(raw) // 2,
                runs=tokenize(trimmed[2:], coalesce),
            ))
        elif kind == "numbered":
            number, content = _numbered(trimmed)
            blocks.append(NumberedItem(number=number, runs=tokenize(content, coalesce)))
        elif kind == "blank":
            if not blocks or not isinstance(blocks[-1], BlankMarker):
                blocks.append(BlankMarker())
        else:
            # The opening line is always taken, so '#### deep' still makes progress.
            start = i - 1
            while i < len(lines) and classify(lines[i].strip()) is None:
                i += 1
            blocks.append(Paragraph(runs=tokenize(" ".join(lines[start:i]), coalesce)))

    return blocks
