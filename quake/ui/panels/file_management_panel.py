# quake/ui/panels/file_management_panel.py
"""
File management tab: list, create and open save files
"""

import logging

from PySide6.QtCore import Qt, QUrl
from PySide6.QtGui import QDesktopServices, QFont
from PySide6.QtWidgets import (
    QHBoxLayout, QLabel, QListWidget, QListWidgetItem, QPushButton, QVBoxLayout
)

from quake.ui.panels.base_panel import BasePanel

logger = logging.getLogger(__name__)


class FileManagementPanel(BasePanel):
    """Panel for choosing the save file to edit"""

    def __init__(self, app_state):
        super().__init__(app_state, "File Management")

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        title = QLabel("File Management")
        title.setFont(QFont("Arial", 16, QFont.Bold))
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        button_layout = QHBoxLayout()
        self.list_button = QPushButton("List Saved Files")
        self.list_button.clicked.connect(self.tracker.list_save_files)
        button_layout.addWidget(self.list_button)

        self.new_file_button = QPushButton("New File")
        self.new_file_button.clicked.connect(self.tracker.create_new_file)
        button_layout.addWidget(self.new_file_button)

        self.open_folder_button = QPushButton("Open Documents Folder")
        self.open_folder_button.clicked.connect(self.open_documents_folder)
        button_layout.addWidget(self.open_folder_button)
        layout.addLayout(button_layout)

        self.file_list = QListWidget()
        self.file_list.setMaximumHeight(200)
        self.file_list.itemClicked.connect(self._on_file_clicked)
        layout.addWidget(self.file_list)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet("color: green;")
        self.status_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.status_label)
        layout.addStretch(1)

    def _connect_signals(self):
        self.tracker.files_changed.connect(self._populate_files)
        self.tracker.status_changed.connect(self.status_label.setText)

    def _populate_files(self, files):
        self.file_list.clear()
        for path in files:
            item = QListWidgetItem(path.name)
            item.setData(Qt.UserRole, str(path))
            self.file_list.addItem(item)

    def _on_file_clicked(self, item):
        self.tracker.open_file(item.data(Qt.UserRole))

    def open_documents_folder(self):
        """Show the save file directory in the platform file browser"""
        documents_dir = self.app_state.documents_dir
        if not QDesktopServices.openUrl(QUrl.fromLocalFile(str(documents_dir))):
            logger.warning(f"Could not open documents folder {documents_dir}")
