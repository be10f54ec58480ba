from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QPushButton

from BackEnd.core.clock import format_elapsed
from BackEnd.models import timer
from BackEnd.services.timer_service import TimerService

_BUTTON_TEXT = {
	timer.START: "▶ Start",
	timer.RESUME: "▶ Resume",
	timer.PAUSE: "❚❚ Pause",
	timer.STOP: "■ Stop",
}

class TaskTimerWidget(QWidget):
	"""Elapsed-time readout plus the buttons valid for the task's timer status."""
	action_requested = Signal(str)

	def __init__(self, parent=None):
		super().__init__(parent)
		lay = QHBoxLayout()
		lay.setContentsMargins(0, 0, 0, 0)
		lay.setSpacing(4)
		self.time_label = QLabel("0:00")
		self.time_label.setObjectName("TimerLabel")
		self.time_label.setMinimumWidth(70)
		self.time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		lay.addWidget(self.time_label)

		self.buttons = {}
		for action, text in _BUTTON_TEXT.items():
			btn = QPushButton(text)
			btn.setObjectName("GhostBtn")
			btn.setCursor(Qt.PointingHandCursor)
			btn.setToolTip(text.split(" ", 1)[1])
			btn.clicked.connect(lambda _=False, a=action: self._request(a))
			btn.hide()
			lay.addWidget(btn)
			self.buttons[action] = btn
		self.setLayout(lay)

		self.service = TimerService(parent=self)
		self.service.tick.connect(self._on_tick)
		self.service.state_changed.connect(self._on_state)

	def set_task(self, task):
		self.service.bind(task)
		self._show_buttons(task.timer_status)
		self.set_busy(False)

	def set_busy(self, busy):
		"""Disable the buttons while a transition is being written."""
		for btn in self.buttons.values():
			btn.setEnabled(not busy)

	def teardown(self):
		self.service.shutdown()

	def _request(self, action):
		self.set_busy(True)
		self.action_requested.emit(action)

	def _show_buttons(self, status):
		visible = timer.available_actions(status)
		for action, btn in self.buttons.items():
			btn.setVisible(action in visible)

	def _on_tick(self, elapsed):
		self.time_label.setText(format_elapsed(elapsed))

	def _on_state(self, state):
		self.time_label.setProperty("running", state == "running")
		self.time_label.style().unpolish(self.time_label)
		self.time_label.style().polish(self.time_label)
