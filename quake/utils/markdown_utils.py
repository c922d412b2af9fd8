# markdown_utils.py
# Converts Markdown to HTML for QTextBrowser using markdown2

import markdown2


def markdown_to_html(text: str) -> str:
    """
    Convert Markdown text to HTML for display in QTextBrowser.
    Raw HTML in the input is escaped.
    """
    return markdown2.markdown(text or "", safe_mode="escape", extras=["tables", "cuddled-lists"])
