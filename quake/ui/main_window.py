# quake/ui/main_window.py - Main application window
"""
Main window for the Quake combat tracker

Hosts the three tabs (file management, character editor, monsters) and
mirrors controller status in the status bar.
"""

import logging

from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QMainWindow, QTabWidget

from quake.ui.panels.character_panel import CharacterPanel, DEFAULT_TITLE
from quake.ui.panels.file_management_panel import FileManagementPanel
from quake.ui.panels.monster_panel import MonsterPanel

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Quake"


class MainWindow(QMainWindow):
    """
    Main application window with a tab per screen
    """

    def __init__(self, app_state):
        """Initialize the main window and UI components"""
        super().__init__()
        self.app_state = app_state
        self.tracker = app_state.combat_tracker
        self._started = False

        self._setup_ui()
        self._create_menus()
        self._create_status_bar()
        self._connect_signals()

    def _setup_ui(self):
        """Configure the main window UI properties"""
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(800, 600)
        width, height = self.app_state.get_window_size()
        self.resize(width, height)

        self.tabs = QTabWidget()
        self.file_panel = FileManagementPanel(self.app_state)
        self.character_panel = CharacterPanel(self.app_state)
        self.monster_panel = MonsterPanel(self.app_state)
        self.tabs.addTab(self.file_panel, self.file_panel.title)
        self.character_tab_index = self.tabs.addTab(self.character_panel, DEFAULT_TITLE)
        self.tabs.addTab(self.monster_panel, self.monster_panel.title)
        self.setCentralWidget(self.tabs)

    def _create_menus(self):
        """Create the main application menus"""
        file_menu = self.menuBar().addMenu("&File")

        new_file_action = QAction("New File", self)
        new_file_action.setShortcut(QKeySequence.New)
        new_file_action.triggered.connect(self.tracker.create_new_file)
        file_menu.addAction(new_file_action)

        list_files_action = QAction("List Saved Files", self)
        list_files_action.setShortcut(QKeySequence.Refresh)
        list_files_action.triggered.connect(self.tracker.list_save_files)
        file_menu.addAction(list_files_action)

        open_folder_action = QAction("Open Documents Folder", self)
        open_folder_action.triggered.connect(self.file_panel.open_documents_folder)
        file_menu.addAction(open_folder_action)

        file_menu.addSeparator()

        exit_action = QAction("Exit", self)
        exit_action.setShortcut(QKeySequence.Quit)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        combat_menu = self.menuBar().addMenu("&Combat")
        end_turn_action = QAction("End Turn", self)
        end_turn_action.setShortcut(QKeySequence("Ctrl+E"))
        end_turn_action.triggered.connect(self.tracker.advance_turn)
        combat_menu.addAction(end_turn_action)

        randomize_action = QAction("Randomize Turn Rolls", self)
        randomize_action.setShortcut(QKeySequence("Ctrl+R"))
        randomize_action.triggered.connect(self.tracker.randomize_turn_rolls)
        combat_menu.addAction(randomize_action)

    def _create_status_bar(self):
        self.statusBar().showMessage("Ready")

    def _connect_signals(self):
        self.tracker.status_changed.connect(self._show_status)
        self.tracker.file_selected.connect(self._on_file_selected)

    def _show_status(self, message):
        self.statusBar().showMessage(message, 5000)

    def _on_file_selected(self, file_name):
        self.tabs.setTabText(self.character_tab_index, file_name or DEFAULT_TITLE)
        self.setWindowTitle(f"{WINDOW_TITLE} - {file_name}" if file_name else WINDOW_TITLE)

    def showEvent(self, event):
        """Load the catalog and file list the first time the window appears"""
        super().showEvent(event)
        if not self._started:
            self._started = True
            self.tracker.load_monsters_async()
            self.tracker.list_save_files()
            if self.app_state.restore_last_file():
                self.tabs.setCurrentIndex(self.character_tab_index)

    def closeEvent(self, event):
        """Remember the window size on close"""
        self.app_state.set_setting("window_size", [self.width(), self.height()])
        super().closeEvent(event)
