from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QPushButton, QCheckBox

from BackEnd.services.due_dates import due_badge
from FrontEnd.components.task_timer import TaskTimerWidget

class TaskRow(QWidget):
	"""One task: completion checkbox, title, due-date badge, timer, delete."""
	toggle_requested = Signal(object)
	delete_requested = Signal(object)
	timer_requested = Signal(str, object)

	def __init__(self, task, now, parent=None):
		super().__init__(parent)
		self.task = task
		self.setObjectName("TodoItem")
		self.setAttribute(Qt.WA_StyledBackground, True)

		lay = QHBoxLayout()
		lay.setContentsMargins(16, 10, 12, 10)
		lay.setSpacing(12)

		self.checkbox = QCheckBox()
		self.checkbox.setChecked(task.completed)
		self.checkbox.clicked.connect(lambda _=False: self.toggle_requested.emit(self.task))
		lay.addWidget(self.checkbox, alignment=Qt.AlignmentFlag.AlignVCenter)

		text_col = QVBoxLayout()
		text_col.setSpacing(2)
		self.title_label = QLabel(task.title)
		self.title_label.setWordWrap(True)
		if task.completed:
			f = self.title_label.font()
			f.setStrikeOut(True)
			self.title_label.setFont(f)
			self.title_label.setObjectName("Muted")
		text_col.addWidget(self.title_label)

		self.badge_label = None
		badge = due_badge(task.due_date, now)
		if badge is not None:
			self.badge_label = QLabel(f"⏰ {badge.text}")
			self.badge_label.setObjectName("Badge")
			self.badge_label.setProperty("kind", badge.kind)
			text_col.addWidget(self.badge_label, alignment=Qt.AlignmentFlag.AlignLeft)
		lay.addLayout(text_col, stretch=1)

		self.timer_widget = TaskTimerWidget()
		self.timer_widget.set_task(task)
		self.timer_widget.action_requested.connect(lambda action: self.timer_requested.emit(action, self.task))
		lay.addWidget(self.timer_widget, alignment=Qt.AlignmentFlag.AlignVCenter)

		delete_btn = QPushButton("🗑")
		delete_btn.setObjectName("GhostBtn")
		delete_btn.setToolTip("Delete task")
		delete_btn.setCursor(Qt.PointingHandCursor)
		delete_btn.clicked.connect(lambda _=False: self.delete_requested.emit(self.task))
		lay.addWidget(delete_btn, alignment=Qt.AlignmentFlag.AlignVCenter)
		self.setLayout(lay)

	def teardown(self):
		self.timer_widget.teardown()
