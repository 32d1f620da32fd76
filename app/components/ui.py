from __future__ import annotations

from pathlib import Path

import streamlit as st


def setup_page(page_title: str, page_icon: str) -> None:
    st.set_page_config(page_title=page_title, page_icon=page_icon, layout="wide")
    css_path = Path(__file__).resolve().parents[1] / "assets" / "style.css"
    if css_path.exists():
        st.markdown(f"<style>{css_path.read_text(encoding='utf-8')}</style>", unsafe_allow_html=True)


def section_title(text: str, anchor: str | None = None) -> None:
    anchor_attr = f' id="{anchor}"' if anchor else ""
    st.markdown(f'<div class="section-title"{anchor_attr}>{text}</div>', unsafe_allow_html=True)


def stat_block(label: str, value: object, average_label: str | None = None, average: str | None = None) -> None:
    right = ""
    if average_label is not None and average is not None:
        right = f'<div class="stat-avg"><span>{average_label}</span><strong>{average}</strong></div>'
    st.markdown(
        f'<div class="stat-block"><div><span class="stat-label">{label}</span>'
        f'<strong class="stat-value">{value}</strong></div>{right}</div>',
        unsafe_allow_html=True,
    )


def resolve_asset(path: str | None) -> Path | None:
    """Return the asset path when it exists on disk, relative paths resolved from the repo root."""
    if not path:
        return None
    candidate = Path(path)
    if not candidate.is_absolute():
        candidate = Path(__file__).resolve().parents[2] / candidate
    return candidate if candidate.exists() else None
