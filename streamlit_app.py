from __future__ import annotations

import json

import pandas as pd
import streamlit as st

from wtc.config import PLATFORM_LIMITS, get_settings
from wtc.core.converter import convert_text
from wtc.core.schemas import MARKER_STYLES, ConvertOptions

def inject_css():
    st.markdown(
        """
        <style>
        .wtc-badge {
            display: inline-block;
            padding: 4px 10px;
            border-radius: 999px;
            background: #F1F5F9;
            border: 1px solid #CBD5E1;
            color: #0F172A;
            font-size: 0.85rem;
            font-weight: 600;
        }
        .wtc-badge.over {
            background: #FEE2E2;
            border-color: #FCA5A5;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def parse_limit(raw: str, default: int) -> int:
    raw = raw.strip()
    if not raw:
        return 0
    try:
        return int(raw)
    except ValueError:
        return default


def length_badge(length: int, limit: int) -> str:
    cls = "wtc-badge over" if length > limit else "wtc-badge"
    return f'<span class="{cls}">{length} characters</span>'


settings = get_settings()

st.set_page_config(page_title="Weibo Text Converter", layout="centered")
inject_css()

st.title("Weibo Text Converter")
st.caption("Convert Weibo emojis and topics to standard ones for cross-platform sharing.")

with st.sidebar:
    st.header("Options")
    add_markers = st.checkbox("Add paragraph markers", value=settings.add_markers)
    marker_style = settings.marker_style
    if add_markers:
        marker_style = st.radio(
            "Marker",
            options=list(MARKER_STYLES),
            index=MARKER_STYLES.index(settings.marker_style),
            horizontal=True,
        )

    st.divider()
    split = st.checkbox("Split text into chunks", value=settings.split)
    limit = settings.max_chunk_size
    if split:
        platform = st.selectbox("Platform preset", options=["custom"] + sorted(PLATFORM_LIMITS))
        default_limit = PLATFORM_LIMITS.get(platform, settings.max_chunk_size)
        limit = parse_limit(
            st.text_input("Character limit", value=str(default_limit)), default_limit
        )
        st.caption("Recommended: 900 for Xiaohongshu's 1000 character limit")

text = st.text_area("Input Weibo text", height=180, placeholder="Paste your Weibo text here...")

if st.button("Convert", use_container_width=True):
    options = ConvertOptions(
        add_markers=add_markers,
        marker_style=marker_style,
        split=split,
        max_chunk_size=limit,
    )
    st.session_state["result"] = convert_text(text, options, source="input").model_dump()

result = st.session_state.get("result")
if not result:
    st.info("Paste some text and click **Convert**.")
    st.stop()

if result["hashtags"]:
    st.write("**Hashtags:** " + " ".join(result["hashtags"]))

chunks = result["chunks"]
if not chunks:
    st.text_area("Converted text", value=result["text"], height=180)
else:
    st.subheader(f"Split text ({len(chunks)} chunks)")
    df = pd.DataFrame(chunks)[["index", "length"]]
    st.dataframe(df, use_container_width=True, hide_index=True)

    for c in chunks:
        header_left, header_right = st.columns([3, 2])
        with header_left:
            st.markdown(f"**Chunk {c['index']}/{c['total']}**")
        with header_right:
            st.markdown(length_badge(c["length"], result["max_chunk_size"]), unsafe_allow_html=True)
        st.code(c["text"], language=None)

st.download_button(
    label="Download JSON",
    data=json.dumps(result, indent=2, ensure_ascii=False).encode("utf-8"),
    file_name="converted.json",
    mime="application/json",
    use_container_width=True,
)
