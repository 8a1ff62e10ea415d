"""GUI entry point for the Linkser application."""

import logging
import sys
from typing import Optional

from PyQt6.QtWidgets import QApplication

from .ui.main_window import MainWindow
from .utils.app_paths import get_log_level


def setup_logging(log_level: Optional[str] = None) -> None:
    """Configure console logging for the application."""
    if log_level is None:
        log_level = get_log_level()

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def main():
    """Launch the GUI application."""
    setup_logging()

    app = QApplication(sys.argv)
    app.setApplicationName("Linkser")

    window = MainWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
