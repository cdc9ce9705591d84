"""Yacht Dice — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st

from src.config import configure_logging, get_settings
from src.engine.base import TurnPhase
from src.ui.components import render_command_bar, render_dice_tray, render_scorecard
from src.ui.controller import GameController


_RULES = """\
**Goal:** Fill all twelve categories for the highest total.

**Turn:**
- Up to **3 rolls**, then you must score
- **Hold** dice to keep them out of the next roll
- **Sort** orders the dice low to high and clears holds

**Scoring:**
| Category | Points |
|---|---|
| Aces-Sixes | Face x count |
| Four Of A Kind | 4 x face |
| Full House | 25 |
| Little Straight (1-2-3-4-5 in order) | 30 |
| Big Straight (2-3-4-5-6 in order) | 30 |
| Yacht | 50 |
| Chance | Sum of dice |
"""

_CSS = """\
.dice-tray { display: flex; gap: 1rem; justify-content: center; margin: 1rem 0; }
.die { width: 3.5rem; height: 3.5rem; border: 2px solid #444; border-radius: 0.5rem;
       display: flex; align-items: center; justify-content: center;
       font-size: 1.8rem; font-weight: bold; }
.die.held { background: #f3d36b; }
.scoreboard-title { font-weight: bold; font-size: 1.2rem; margin-bottom: 0.5rem; }
"""


def _controller() -> GameController:
    """One controller per browser session."""
    if "controller" not in st.session_state:
        settings = get_settings()
        configure_logging(settings)
        st.session_state["controller"] = GameController.from_settings(settings)
    return st.session_state["controller"]


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Yacht Dice",
        page_icon="🎲",
        layout="wide",
    )
    st.markdown(f"<style>{_CSS}</style>", unsafe_allow_html=True)

    controller = _controller()

    if not controller.running:
        st.info("Thanks for playing! Refresh the page to start again.")
        del st.session_state["controller"]
        st.stop()

    snap = controller.snapshot()
    turn_key = f"{snap.phase}_{snap.total}_{len([r for r in snap.rows if r.is_used])}"

    st.title("Yacht Dice")
    left, right = st.columns([2, 3])

    with left:
        chosen = render_scorecard(snap.rows, snap.total, disabled=snap.is_over)

    with right:
        st.markdown(f"**Game Status:** {snap.phase_label}")
        held_die = render_dice_tray(snap.dice, snap.holds, turn_key, disabled=snap.is_over)
        line = render_command_bar(
            can_roll=snap.phase != TurnPhase.THIRD_ROLL.name,
            is_over=snap.is_over,
        )
        if snap.message:
            st.caption(snap.message)

    if chosen is not None:
        line = f"score {chosen}"
    elif held_die is not None:
        line = f"hold {held_die}"

    if line is not None:
        controller.submit(line)
        st.rerun()

    with st.sidebar:
        st.markdown("### Rules")
        st.markdown(_RULES)


if __name__ == "__main__":
    main()
