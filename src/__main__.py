"""Yacht Dice — terminal entrypoint (``python -m src``)."""

from src.config import configure_logging, get_settings
from src.ui.controller import GameController
from src.ui.terminal import run


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    run(GameController.from_settings(settings))


if __name__ == "__main__":
    main()
