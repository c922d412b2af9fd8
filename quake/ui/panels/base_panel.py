# quake/ui/panels/base_panel.py - Base panel class
"""
Base panel class for the tracker's tabs

Defines the common functionality and interface for all panel types.
"""

from PySide6.QtWidgets import QWidget


class BasePanel(QWidget):
    """
    Base class for all panel widgets

    Panels render controller state and forward user actions to it.
    """

    def __init__(self, app_state, title="Panel"):
        """Initialize the base panel"""
        super().__init__()
        self.app_state = app_state
        self.tracker = app_state.combat_tracker
        self._title = title

        # Call _setup_ui which will be implemented by subclasses
        self._setup_ui()
        self._connect_signals()

    @property
    def title(self):
        """Get the panel title"""
        return self._title

    def _setup_ui(self):
        """
        Set up the panel UI - to be implemented by subclasses
        """
        pass

    def _connect_signals(self):
        """
        Connect to controller signals - to be implemented by subclasses
        """
        pass
