"""
Layout primitives for consistent page structure.

Provides reusable components for the page header, sections and cards.
"""

from contextlib import contextmanager
from typing import Optional
import streamlit as st


def page_header(title: str, subtitle: Optional[str] = None) -> None:
    """
    Render a consistent page header with title and optional subtitle.

    Args:
        title: Main page title
        subtitle: Optional subtitle/description text
    """
    st.markdown(f"# {title}")
    if subtitle:
        st.caption(subtitle)


def section(title: str, caption: Optional[str] = None) -> None:
    """
    Render a section header with optional caption.

    Args:
        title: Section title
        caption: Optional caption/help text below title
    """
    st.markdown(f"### {title}")
    if caption:
        st.caption(caption)


@contextmanager
def card():
    """
    Context manager for a bordered card container.

    Usage:
        with card():
            st.write("Card content")
    """
    with st.container(border=True):
        yield
