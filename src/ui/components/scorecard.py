"""Scorecard component — the twelve categories and the running total."""

from __future__ import annotations

import streamlit as st

from src.ui.models import CategoryRow


def render_scorecard(rows: list[CategoryRow], total: int, disabled: bool = False) -> int | None:
    """Render one row per category with a score button for open categories.

    Args:
        rows: Scorecard rows in category order.
        total: Running total of recorded scores.
        disabled: Force-disable all buttons (game over).

    Returns:
        Number (1-12) of the category the player chose to score, or ``None``.
    """
    chosen: int | None = None
    st.markdown('<div class="scoreboard-title">Score Table</div>', unsafe_allow_html=True)

    for row in rows:
        name_col, score_col = st.columns([3, 1])
        with name_col:
            st.markdown(f"**{row.number}** &mdash; {row.label}")
        with score_col:
            if row.is_used:
                st.markdown(f"`{row.score}`")
            else:
                label = f"+{row.potential}" if row.potential is not None else "Score"
                if st.button(
                    label,
                    key=f"score_{row.number}",
                    use_container_width=True,
                    disabled=disabled,
                ):
                    chosen = row.number

    st.markdown(f"### Total: {total}")
    return chosen
