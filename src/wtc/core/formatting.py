from __future__ import annotations

import json
import re
from pathlib import Path

from wtc.core.schemas import MARKER_STYLES

# Weibo topics are written #topic#; other platforms expect #topic.
WEIBO_TOPIC_RE = re.compile(r"#([^#\s]+)#")


def load_emoji_mapping(path: str | Path | None = None) -> dict[str, str]:
    if path is None:
        path = Path(__file__).resolve().parents[1] / "data" / "emoji_map.json"
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Emoji mapping in {path} must be a JSON object")
    return {str(k): str(v) for k, v in data.items()}


EMOJI_MAPPING = load_emoji_mapping()


def convert_weibo_emojis(text: str, mapping: dict[str, str] | None = None) -> str:
    """Replace Weibo emoji shortcodes such as ``[微笑]`` with Unicode emoji."""
    if mapping is None:
        mapping = EMOJI_MAPPING
    for code, emoji in mapping.items():
        text = text.replace(code, emoji)
    return text


def convert_weibo_hashtags(text: str) -> str:
    """
    Turn Weibo topics into plain hashtags: ``#北京动物园#`` becomes ``#北京动物园``.
    Adjacent topics (``#旅行##美食#``) are converted one after another.
    """
    return WEIBO_TOPIC_RE.sub(r"#\1", text)


def add_paragraph_markers(text: str, marker_style: str = "➤") -> str:
    if marker_style not in MARKER_STYLES:
        raise ValueError(
            f"Unknown marker style {marker_style!r}; expected one of {' '.join(MARKER_STYLES)}"
        )

    return "\n".join(
        f"{marker_style} {line}" if line.strip() else line
        for line in text.split("\n")
    )
