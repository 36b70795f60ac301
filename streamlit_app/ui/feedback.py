"""
Standardized feedback utilities for errors, empty states, toasts and loading.

Provides reusable components so every failure of a generation is reported
the same way: one toast plus an optional inline error.
"""

from contextlib import contextmanager
from typing import Optional
import streamlit as st


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Display a standardized error message with optional hint.

    Args:
        message: Main error message to display
        hint: Optional hint text to help users resolve the issue
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def notify_success(title: str, message: str) -> None:
    """Show a success toast (title in bold, message below)."""
    st.toast(f"**{title}**\n\n{message}", icon="✅")


def notify_error(message: str, title: str = "Error") -> None:
    """Show an error toast."""
    st.toast(f"**{title}**\n\n{message}", icon="⚠️")


def show_empty_state(title: str, subtitle: Optional[str] = None) -> None:
    """
    Display a standardized empty state.

    Args:
        title: Main empty state title
        subtitle: Optional subtitle/description text
    """
    st.info(f"👨‍🍳 **{title}**")
    if subtitle:
        st.caption(subtitle)


@contextmanager
def working_spinner(label: str = "Working…"):
    """
    Context manager wrapper for standardized loading spinners.

    Usage:
        with working_spinner("Generating..."):
            # Do work here
            pass
    """
    with st.spinner(label):
        yield
