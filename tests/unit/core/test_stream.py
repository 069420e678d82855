"""Unit tests for core/stream.py"""

import pytest

from streammd.core.models import InlineStyle
from streammd.core.parse import parse
from streammd.core.stream import iter_prefixes, replay
from streammd.core.utils.hashing import document_hash


@pytest.mark.parametrize("text,size,expected", [
    ("abcdef", 4, ["abcd", "abcdef"]),
    ("abcd", 2, ["ab", "abcd"]),
    ("abc", 10, ["abc"]),
    ("", 3, [""]),
])
def test_iter_prefixes(text, size, expected):
    """Prefixes grow by chunk_size and always end with the full text."""
    assert list(iter_prefixes(text, size)) == expected


def test_iter_prefixes_rejects_zero_chunk():
    with pytest.raises(ValueError, match="chunk_size"):
        list(iter_prefixes("abc", 0))


def test_replay_final_frame_matches_full_parse(sample_response):
    """The last frame is the same document a one-shot parse produces."""
    frames = replay(sample_response, chunk_size=7)
    assert frames[-1].document == parse(sample_response)
    assert frames[-1].length == len(sample_response)


def test_replay_every_character(sample_response):
    """Every prefix, one character at a time, parses without error."""
    frames = replay(sample_response, chunk_size=1)
    assert len(frames) == len(sample_response)
    assert frames[0].changed


def test_replay_flags_unchanged_updates():
    """Extra blank lines collapse, so later updates leave the document unchanged."""
    frames = replay("a\n\n\n", chunk_size=1)
    assert [f.changed for f in frames] == [True, True, False, False]
    assert frames[2].hash == frames[3].hash


def test_replay_bold_appears_only_once_closed():
    """Mid-stream the open marker is literal; the bold run appears with its closer."""
    frames = replay("**bold**", chunk_size=1)
    styles = [{r.style for b in f.document.blocks for r in b.runs} for f in frames]
    assert all(InlineStyle.bold not in s for s in styles[:-1])
    assert InlineStyle.bold in styles[-1]


def test_replay_open_fence_streams_as_code():
    """An unclosed fence renders its partial contents as code on every update."""
    frames = replay("```\nprint(1)\n", chunk_size=4)
    assert all(f.document.kinds() == ["code"] for f in frames)
    assert frames[-1].document.blocks[0].raw == "print(1)\n"


def test_document_hash_is_structural(sample_response):
    assert document_hash(parse(sample_response)) == document_hash(parse(sample_response))
    assert document_hash(parse("a")) != document_hash(parse("b"))
