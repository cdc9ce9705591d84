"""Dice tray component — renders the five dice with hold toggles."""

from __future__ import annotations

import streamlit as st


def render_dice_tray(
    dice: list[int],
    holds: list[bool],
    turn_key: str,
    disabled: bool = False,
) -> int | None:
    """Render the dice row and one hold button per die.

    Args:
        dice: Current dice face values.
        holds: Hold flag per die, same order as ``dice``.
        turn_key: Changes whenever the board changes; keeps button keys unique.
        disabled: Force-disable all buttons (game over).

    Returns:
        1-based number of the die whose hold was clicked, or ``None``.
    """
    html_parts = ['<div class="dice-tray">']
    for val, held in zip(dice, holds):
        classes = ["die", "held"] if held else ["die"]
        html_parts.append(f'<div class="{" ".join(classes)}">{val}</div>')
    html_parts.append("</div>")
    st.markdown("".join(html_parts), unsafe_allow_html=True)

    clicked: int | None = None
    cols = st.columns(len(dice))
    for i, col in enumerate(cols):
        with col:
            label = "Held" if holds[i] else "Hold"
            if st.button(
                label,
                key=f"hold_{i}_{turn_key}",
                use_container_width=True,
                type="primary" if holds[i] else "secondary",
                disabled=disabled,
            ):
                clicked = i + 1
    return clicked
