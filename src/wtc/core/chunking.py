from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

HASHTAG_RE = re.compile(r"#[^#\s]+")
WHITESPACE_RE = re.compile(r"\s")
SENTENCE_ENDINGS = ".!?"


def extract_hashtags(text: str) -> list[str]:
    """Distinct hashtags in ``text``, in order of first appearance."""
    return list(dict.fromkeys(HASHTAG_RE.findall(text)))


def find_split_index(text: str, max_length: int) -> int:
    """
    Pick where the next chunk of ``text`` should end.

    Tries a blank line, a line break, a sentence ending and a whitespace
    character, in that order. A break is only taken if it sits in the
    second half of the window, otherwise the text is cut at ``max_length``.
    """
    half = max_length / 2

    for sep in ("\n\n", "\n"):
        idx = text.rfind(sep, 0, max_length + len(sep))
        if idx > 0 and idx >= half:
            return idx + len(sep)

    window = text[:max_length]
    idx = max(window.rfind(c) for c in SENTENCE_ENDINGS)
    if idx > 0 and idx >= half:
        return idx + 1

    spaces = [m.start() for m in WHITESPACE_RE.finditer(text, 0, max_length + 1)]
    if spaces and spaces[-1] > 0 and spaces[-1] >= half:
        return spaces[-1] + 1

    return max_length


def split_into_chunks(text: str, max_chunk_size: int = 900) -> list[str]:
    """
    Split text into chunks of at most ``max_chunk_size`` characters.

    Hashtags found anywhere in the text are appended to every chunk except
    the last one. A text that fits in a single chunk keeps the hashtags too.
    """
    max_chunk_size = max(1, max_chunk_size)

    hashtags = extract_hashtags(text)
    suffix = "\n\n" + " ".join(hashtags) if hashtags else ""
    available = max(1, max_chunk_size - len(suffix))

    if len(text) <= available:
        return [text + suffix]

    chunks: list[str] = []
    remaining = text

    while remaining:
        if len(remaining) <= available:
            chunks.append(remaining)
            break

        split_at = find_split_index(remaining, available)
        piece = remaining[:split_at].strip()
        # whitespace-only windows produce no chunk
        if piece:
            chunks.append(piece + suffix)
        remaining = remaining[split_at:].strip()

    logger.debug(
        "split %d chars into %d chunks (limit=%d, hashtags=%d)",
        len(text), len(chunks), max_chunk_size, len(hashtags),
    )
    return chunks or [""]
