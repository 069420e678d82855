"""Stream replay: re-parse successively longer prefixes the way a live response is rendered"""

from dataclasses import dataclass
from typing import Iterator

from streammd.core.models import Document
from streammd.core.parse import parse
from streammd.core.utils.hashing import document_hash
from streammd.core.utils.logger import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True)
class StreamFrame:
    """The document seen after one incremental update."""
    length:   int        # characters received so far
    hash:     str        # document_hash(document)
    document: Document
    changed:  bool       # False when the update did not alter the structure


def iter_prefixes(text: str, chunk_size: int) -> Iterator[str]:
    """Yield prefixes of text growing by chunk_size; the last one is always the full text."""
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
    for end in range(chunk_size, len(text), chunk_size):
        yield text[:end]
    yield text


def replay(text: str, chunk_size: int = 16, coalesce: bool = True) -> list[StreamFrame]:
    """Parse every prefix from scratch and record which updates changed the document.

    No parse state is carried between prefixes; each frame comes from a full parse.
    """
    frames: list[StreamFrame] = []
    previous = None
    for prefix in iter_prefixes(text, chunk_size):
        document = parse(prefix, coalesce=coalesce)
        digest = document_hash(document)
        frames.append(StreamFrame(
            length=len(prefix),
            hash=digest,
            document=document,
            changed=digest != previous,
        ))
        previous = digest

    changed = sum(f.changed for f in frames)
    logger.info("replayed %d prefix(es) of %d char(s); %d changed", len(frames), len(text), changed)
    return frames
