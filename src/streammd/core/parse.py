"""Parse entry points: text or file in, Document out"""

from pathlib import Path

from streammd.core.models import Document
from streammd.core.segment import segment
from streammd.core.utils.logger import get_logger


TEXT_EXTENSIONS = {'.md', '.mdx', '.markdown', '.txt'}

logger = get_logger(__name__)


def parse(text: str, coalesce: bool = True) -> Document:
    """Segment and tokenize text into a fresh Document. Pure; safe to call per stream update."""
    return Document(blocks=segment(text, coalesce=coalesce))


def discover_files(path: Path) -> list[Path]:
    """Return [path] for a file, else sorted text/markdown files under the directory."""
    if path.is_file():
        return [path]
    if not path.is_dir():
        return []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in TEXT_EXTENSIONS)


def parse_file(path: Path, coalesce: bool = True) -> Document:
    """Read a UTF-8 file and parse it. OSError and UnicodeDecodeError propagate."""
    text = path.read_text(encoding='utf-8')
    document = parse(text, coalesce=coalesce)
    logger.debug("parsed %s: %d block(s) from %d char(s)", path, len(document.blocks), len(text))
    return document
