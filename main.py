#!/usr/bin/env python3

"""
Main entry point for the Quake combat tracker

This desktop application lets a game master keep a roster of characters
and monsters, track turn order and hit points, and browse a monster
reference list.
"""

import sys
import logging

from PySide6.QtWidgets import QApplication

from quake.core.app_state import AppState
from quake.core.config import get_log_path
from quake.ui.main_window import MainWindow


def setup_logging():
    """Send DEBUG to the log file and INFO to the console"""
    log_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Stream Handler (console)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(log_formatter)
    stream_handler.setLevel(logging.INFO)
    root_logger.addHandler(stream_handler)

    # File Handler (debug.log), appended across runs
    log_file_path = get_log_path()
    file_handler = logging.FileHandler(log_file_path, 'a', encoding='utf-8')
    file_handler.setFormatter(log_formatter)
    file_handler.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    logging.debug(f"Logging DEBUG messages to: {log_file_path}")


def main():
    """Main application entry point"""
    setup_logging()
    logging.info("Starting Quake combat tracker")

    # Create the Qt Application
    app = QApplication(sys.argv)
    app.setApplicationName("Quake")
    app.setApplicationVersion("1.0.0")

    # Initialize application state
    app_state = AppState()

    # Create and show the main window
    window = MainWindow(app_state)
    window.show()

    # Set up cleanup on exit
    app.aboutToQuit.connect(app_state.close)

    # Start the event loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
