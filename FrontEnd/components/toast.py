from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import QLabel

class Toast(QLabel):
    """Transient notification pinned to the bottom-right of its parent."""

    DURATION_MS = 3500

    def __init__(self, parent):
        super().__init__(parent)
        self.setObjectName("Toast")
        self.setWordWrap(True)
        self.setMaximumWidth(360)
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
        self.hide()
        self._hide_timer = QTimer(self)
        self._hide_timer.setSingleShot(True)
        self._hide_timer.timeout.connect(self.hide)

    def show_message(self, text, variant="success"):
        self.setText(text)
        self.setProperty("variant", variant)
        # re-evaluate the [variant=...] selector
        self.style().unpolish(self)
        self.style().polish(self)
        self.adjustSize()
        self._place()
        self.show()
        self.raise_()
        self._hide_timer.start(self.DURATION_MS)

    def _place(self):
        parent = self.parentWidget()
        if parent is None:
            return
        margin = 24
        self.move(parent.width() - self.width() - margin, parent.height() - self.height() - margin)
