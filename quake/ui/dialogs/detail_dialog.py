# detail_dialog.py
# Minimal dialog for displaying a monster stat block

from PySide6.QtWidgets import QDialog, QDialogButtonBox, QTextBrowser, QVBoxLayout

from quake.utils.markdown_utils import markdown_to_html
from quake.utils.stat_block import display_text, monster_to_markdown


class DetailDialog(QDialog):
    def __init__(self, parent, monster):
        super().__init__(parent)
        self.setWindowTitle(f"Details: {display_text(monster.name)}")
        self.resize(600, 500)
        layout = QVBoxLayout(self)

        self.browser = QTextBrowser()
        self.browser.setHtml(markdown_to_html(monster_to_markdown(monster)))
        self.browser.setReadOnly(True)
        layout.addWidget(self.browser)

        # Close button
        button_box = QDialogButtonBox(QDialogButtonBox.Close)
        button_box.rejected.connect(self.reject)
        layout.addWidget(button_box)
