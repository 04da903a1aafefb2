import logging

import pytest
from pydantic import ValidationError

from wtc.core.converter import build_chunks, convert_text, effective_chunk_size
from wtc.core.schemas import ConvertOptions


def test_default_pipeline():
    result = convert_text("今天[微笑]\n#北京#")

    assert result.text == "➤ 今天😊\n➤ #北京"
    assert result.hashtags == ["#北京"]
    assert result.chunks == []
    assert result.max_chunk_size is None
    assert result.source == "<text>"


def test_pipeline_without_markers():
    result = convert_text("[赞] #好#", ConvertOptions(add_markers=False), source="post.txt")

    assert result.text == "👍 #好"
    assert result.source == "post.txt"


def test_pipeline_split_builds_numbered_chunks():
    text = "First sentence here. Second sentence here. Third one closes it."
    options = ConvertOptions(add_markers=False, split=True, max_chunk_size=30)

    result = convert_text(text, options)

    assert len(result.chunks) > 1
    assert result.max_chunk_size == 30
    total = len(result.chunks)
    for idx, chunk in enumerate(result.chunks, start=1):
        assert chunk.index == idx
        assert chunk.total == total
        assert chunk.length == len(chunk.text)
        assert chunk.length <= 30


def test_pipeline_clamps_zero_limit():
    options = ConvertOptions(add_markers=False, split=True, max_chunk_size=0)

    result = convert_text("ab", options)

    assert result.max_chunk_size == 1
    assert [c.text for c in result.chunks] == ["a", "b"]


def test_effective_chunk_size():
    assert effective_chunk_size(900) == 900
    assert effective_chunk_size(0) == 1
    assert effective_chunk_size(-3) == 1


def test_build_chunks_single():
    chunks = build_chunks("short", 900)
    assert len(chunks) == 1
    assert chunks[0].index == 1 and chunks[0].total == 1


def test_invalid_marker_rejected():
    with pytest.raises(ValidationError):
        ConvertOptions(marker_style="*")


def test_chunk_counts_logged_at_debug_only(caplog):
    options = ConvertOptions(add_markers=False, split=True, max_chunk_size=5)

    caplog.set_level(logging.INFO, logger="wtc.core.converter")
    convert_text("hello world", options, source="quiet")
    assert not [r for r in caplog.records if r.name == "wtc.core.converter"]

    caplog.set_level(logging.DEBUG, logger="wtc.core.converter")
    convert_text("hello world", options, source="loud")
    records = [r for r in caplog.records if r.name == "wtc.core.converter"]
    assert records and records[-1].levelno == logging.DEBUG
