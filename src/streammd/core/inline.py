"""Inline tokenizer: split one block's text into plain, bold, italic and code runs"""

from streammd.core.models import InlineRun, InlineStyle


# Tried in order at every position; first delimiter with a closer wins.
SPAN_RULES: tuple[tuple[InlineStyle, tuple[str, ...]], ...] = (
    (InlineStyle.bold,   ("**", "__")),
    (InlineStyle.italic, ("*", "_")),
    (InlineStyle.code,   ("`",)),
)


def _extract(content: str, pos: int, delimiter: str) -> tuple[str, int] | None:
    """Return (inner_text, next_pos) if content[pos:] opens with delimiter and a closer follows.

    The nearest closer is taken as-is; if it leaves an empty span there is no match,
    so '**bold' stays literal instead of reading as an empty '*' span.
    """
    if not content.startswith(delimiter, pos):
        return None
    start = pos + len(delimiter)
    end = content.find(delimiter, start)
    if end <= start:
        return None
    return content[start:end], end + len(delimiter)


def _match_span(content: str, pos: int) -> tuple[InlineStyle, str, int] | None:
    """Try every span rule at pos in priority order."""
    for style, delimiters in SPAN_RULES:
        for delimiter in delimiters:
            found = _extract(content, pos, delimiter)
            if found is not None:
                inner, next_pos = found
                return style, inner, next_pos
    return None


def tokenize(content: str, coalesce: bool = True) -> list[InlineRun]:
    """Scan content left to right into styled runs. Never fails.

    Span text is not re-tokenized, so a bold span shows any inner markup literally.
    An opener without a closer (common mid-stream) falls back to one plain character
    at a time. With coalesce, adjacent plain characters are merged into one run;
    without it every unmatched character is its own run.
    """
    runs: list[InlineRun] = []
    pending: list[str] = []

    def _flush() -> None:
        if pending:
            runs.append(InlineRun(text="".join(pending)))
            pending.clear()

    pos = 0
    while pos < len(content):
        span = _match_span(content, pos)
        if span is None:
            if coalesce:
                pending.append(content[pos])
            else:
                runs.append(InlineRun(text=content[pos]))
            pos += 1
            continue
        style, inner, pos = span
        _flush()
        runs.append(InlineRun(text=inner, style=style))

    _flush()
    return runs
