"""
Ride-Sharing Console Simulator
==============================
Entry point. Run with: python main.py
"""

import logging

from src.cli.menu import ConsoleMenu
from src.config import settings
from src.services.dispatch import DispatchService


def main() -> None:
    logging.basicConfig(level=settings.log_level)
    ConsoleMenu(DispatchService()).run()


if __name__ == "__main__":
    main()
