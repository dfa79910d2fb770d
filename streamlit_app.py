from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import streamlit as st

from tweetsplit.core.chunking import DEFAULT_MAX_LENGTH, LimitTooSmallError
from tweetsplit.core.schemas import build_report

def inject_css():
    st.markdown(
        """
        <style>
        /* Overall background */
        .stApp {
            background: #F7F9FC;
        }

        /* Main container */
        .block-container {
            padding-top: 2rem;
            padding-bottom: 2rem;
            max-width: 1200px;
        }

        /* Sidebar */
        section[data-testid="stSidebar"] {
            background: #FFFFFF !important;
            border-right: 1px solid #E5E7EB;
        }

        /* Dataframe */
        div[data-testid="stDataFrame"] {
            border-radius: 12px;
            overflow: hidden;
            border: 1px solid #E5E7EB;
            background: #FFFFFF;
        }

        /* Chunk count badge */
        .ts-badge {
            display: inline-block;
            padding: 6px 10px;
            border-radius: 999px;
            background: #F1F5F9;
            border: 1px solid #CBD5E1;
            color: #0F172A;
            font-size: 0.9rem;
            font-weight: 600;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def decode_bytes(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return data.decode("latin-1", errors="replace")


def count_badge(n_chunks: int, max_length: int) -> str:
    label = "chunk" if n_chunks == 1 else "chunks"
    return f'<span class="ts-badge"><b>{n_chunks}</b> {label} of at most {max_length} chars</span>'


st.set_page_config(page_title="tweetsplit", layout="wide")
inject_css()

st.title("tweetsplit")
st.caption("Paste or upload text. Get it back in pieces that fit, split on whitespace.")

with st.sidebar:
    st.header("Settings")
    max_length = st.number_input("Max chunk length", min_value=1, value=DEFAULT_MAX_LENGTH, step=1)

uploaded = st.file_uploader("Upload a text file", type=None, accept_multiple_files=False)
pasted = st.text_area("...or paste text", value="", height=200)

if uploaded is not None:
    source = uploaded.name
    text = decode_bytes(uploaded.getvalue())
else:
    source = "pasted"
    text = pasted

if not text.strip():
    st.info("Upload a file or paste some text to split.")
    st.stop()

try:
    report = build_report(text, int(max_length), source=source)
except LimitTooSmallError as e:
    st.error(str(e))
    st.stop()

data = report.model_dump()

st.markdown(count_badge(len(report.chunks), report.max_length), unsafe_allow_html=True)

df = pd.DataFrame(data["chunks"], columns=["index", "length", "text"])
st.dataframe(df, use_container_width=True, hide_index=True)

st.download_button(
    label="Download JSON report",
    data=json.dumps(data, indent=2).encode("utf-8"),
    file_name=f"{Path(source).stem or 'text'}_chunks.json",
    mime="application/json",
    use_container_width=True,
)
