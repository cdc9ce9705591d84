"""Command bar — Roll / Sort / New buttons plus a free-text command box."""

from __future__ import annotations

import streamlit as st


def render_command_bar(can_roll: bool, is_over: bool) -> str | None:
    """Render the turn buttons and the typed-command form.

    Returns:
        A command line to submit (``"roll"``, ``"sort"``, ``"new"`` or the
        typed text), or ``None`` if nothing was triggered.
    """
    cols = st.columns(3)

    with cols[0]:
        if st.button(
            "Roll",
            key="btn_roll",
            use_container_width=True,
            disabled=not can_roll or is_over,
            type="primary",
        ):
            return "roll"

    with cols[1]:
        if st.button("Sort", key="btn_sort", use_container_width=True, disabled=is_over):
            return "sort"

    with cols[2]:
        if st.button("New Game", key="btn_new", use_container_width=True):
            return "new"

    with st.form("command_form", clear_on_submit=True):
        line = st.text_input("Command", placeholder="help")
        if st.form_submit_button("Send") and line.strip():
            return line

    return None
