from __future__ import annotations

import logging
from typing import Optional

from wtc.core.chunking import extract_hashtags, split_into_chunks
from wtc.core.formatting import (
    add_paragraph_markers,
    convert_weibo_emojis,
    convert_weibo_hashtags,
)
from wtc.core.schemas import Chunk, ConversionResult, ConvertOptions

logger = logging.getLogger(__name__)


def effective_chunk_size(max_chunk_size: int) -> int:
    # an empty or zero limit field still means "at least one character"
    return max_chunk_size if max_chunk_size > 0 else 1


def build_chunks(text: str, max_chunk_size: int) -> list[Chunk]:
    pieces = split_into_chunks(text, effective_chunk_size(max_chunk_size))
    total = len(pieces)
    return [
        Chunk(index=idx, total=total, text=piece, length=len(piece))
        for idx, piece in enumerate(pieces, start=1)
    ]


def convert_text(
    text: str,
    options: Optional[ConvertOptions] = None,
    *,
    source: str = "<text>",
    emoji_mapping: Optional[dict[str, str]] = None,
) -> ConversionResult:
    """
    Run the full conversion: Weibo emoji, Weibo topics, paragraph markers and,
    when ``options.split`` is set, chunking for the target character limit.
    """
    options = options or ConvertOptions()

    converted = convert_weibo_emojis(text, emoji_mapping)
    converted = convert_weibo_hashtags(converted)
    if options.add_markers:
        converted = add_paragraph_markers(converted, options.marker_style)

    chunks: list[Chunk] = []
    limit = None
    if options.split:
        limit = effective_chunk_size(options.max_chunk_size)
        chunks = build_chunks(converted, limit)
        logger.debug("%s: %d chunks at %d chars", source, len(chunks), limit)

    return ConversionResult(
        source=source,
        text=converted,
        hashtags=extract_hashtags(converted),
        chunks=chunks,
        max_chunk_size=limit,
    )
