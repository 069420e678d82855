"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from streammd.config import Settings, load_config
from streammd.core.export import strip_markdown, to_dict, to_plain_text
from streammd.core.models import Document
from streammd.core.parse import discover_files, parse, parse_file
from streammd.core.stream import replay
from streammd.core.utils.logger import configure_logging, get_logger


logger = get_logger(__name__)

FORMAT_EXTENSIONS = {"json": "json", "text": "txt"}


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging from it."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings.log_level)
    return settings


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)


def _render(document: Document, fmt: str) -> str:
    if fmt == "text":
        return to_plain_text(document)
    return json.dumps(to_dict(document), indent=2, ensure_ascii=False)


def parse_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to parse")],
    fmt: Annotated[Optional[str], typer.Option("--format", help="json or text")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Write one output file per input here")] = None,
    ):
    """Parse markdown into typed blocks and styled runs."""
    settings = _settings(overrides={"output_format": fmt, "output_dir": out})
    root = Path(path)
    files = discover_files(root)
    if not files:
        typer.echo(f"No markdown or text files found at {path}.")
        raise typer.Exit(1)

    # Output mirrors the source tree under the directory that was passed in.
    base = root if root.is_dir() else root.parent
    output_dir = Path(settings.output_dir) if settings.output_dir else None
    if output_dir:
        output_dir.mkdir(parents=True, exist_ok=True)

    for p in files:
        try:
            document = parse_file(p, coalesce=settings.coalesce_runs)
        except (OSError, UnicodeDecodeError) as e:
            _fail(f"Cannot read {p}", e)
        rendered = _render(document, settings.output_format)
        if output_dir is None:
            typer.echo(rendered)
            continue
        ext = FORMAT_EXTENSIONS[settings.output_format]
        dest = (output_dir / p.relative_to(base)).with_suffix(f".{ext}")
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(rendered + "\n", encoding="utf-8")
        typer.echo(f"  {p} -> {dest}")

    if output_dir:
        typer.echo(f"Parsed {len(files)} document(s) to {output_dir}/")


def plain_cmd(
    path: Annotated[str, typer.Argument(help="File to convert")],
    raw: Annotated[bool, typer.Option("--raw", help="Strip markup by regex instead of parsing")] = False,
    ):
    """Print a file's text with markdown styling removed."""
    settings = _settings()
    text = _read(Path(path))
    if raw:
        typer.echo(strip_markdown(text))
    else:
        typer.echo(to_plain_text(parse(text, coalesce=settings.coalesce_runs)))


def stream_cmd(
    path: Annotated[str, typer.Argument(help="File whose contents are replayed as a stream")],
    chunk: Annotated[Optional[int], typer.Option("--chunk-size", help="Characters added per update")] = None,
    show_all: Annotated[bool, typer.Option("--all", help="Also print updates that left the document unchanged")] = False,
    ):
    """Replay a file as a growing stream, re-parsing every prefix from scratch."""
    settings = _settings(overrides={"chunk_size": chunk})
    text = _read(Path(path))

    frames = replay(text, settings.chunk_size, coalesce=settings.coalesce_runs)
    for frame in frames:
        if frame.changed or show_all:
            marker = "*" if frame.changed else " "
            typer.echo(f"{marker}{frame.length:>7} {frame.hash[:12]} {' '.join(frame.document.kinds())}")

    changed = sum(f.changed for f in frames)
    logger.debug("stream replay of %s finished", path)
    typer.echo(
        f"Replayed {len(frames)} update(s) - "
        f"{changed} changed, "
        f"{len(frames) - changed} unchanged"
    )
