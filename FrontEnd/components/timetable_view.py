from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
	QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QPushButton, QLineEdit,
	QComboBox, QScrollArea
)

from BackEnd.core.errors import ValidationError
from BackEnd.models.timetable import DAYS
from BackEnd.services.timetable import Timetable

class TimetableView(QWidget):
	"""Weekly study timetable: an add form and one card per day.

	Entries live only as long as this widget.
	"""
	notify = Signal(str, str)  # (variant, message)

	def __init__(self, parent=None):
		super().__init__(parent)
		self.timetable = Timetable()
		outer = QVBoxLayout()
		outer.setContentsMargins(32, 32, 32, 32)
		outer.setSpacing(16)

		title = QLabel("Add Study Session")
		title.setObjectName("PageTitle")
		outer.addWidget(title)

		form = QHBoxLayout()
		form.setSpacing(8)
		self.day_combo = QComboBox()
		self.day_combo.addItems(DAYS)
		self.time_input = QLineEdit()
		self.time_input.setPlaceholderText("Time (e.g. 09:00)")
		self.subject_input = QLineEdit()
		self.subject_input.setPlaceholderText("Subject")
		self.topic_input = QLineEdit()
		self.topic_input.setPlaceholderText("Topic (optional)")
		add_btn = QPushButton("+ Add to Timetable")
		add_btn.clicked.connect(self._add_entry)
		self.subject_input.returnPressed.connect(self._add_entry)
		for widget in (self.day_combo, self.time_input, self.subject_input, self.topic_input):
			form.addWidget(widget, stretch=1)
		form.addWidget(add_btn)
		outer.addLayout(form)

		scroll = QScrollArea()
		scroll.setWidgetResizable(True)
		scroll.setFrameShape(QScrollArea.NoFrame)
		grid_host = QWidget()
		self.grid = QGridLayout()
		self.grid.setSpacing(12)
		self.grid.setAlignment(Qt.AlignmentFlag.AlignTop)
		grid_host.setLayout(self.grid)
		scroll.setWidget(grid_host)
		outer.addWidget(scroll, stretch=1)
		self.setLayout(outer)

		self._cards = {}
		for i, day in enumerate(DAYS):
			card = QWidget()
			card.setObjectName("DayCard")
			card.setAttribute(Qt.WA_StyledBackground, True)
			card_layout = QVBoxLayout()
			card_layout.setAlignment(Qt.AlignmentFlag.AlignTop)
			header = QLabel(day)
			header.setStyleSheet("font-weight: 700; font-size: 16px;")
			card_layout.addWidget(header)
			card.setLayout(card_layout)
			self.grid.addWidget(card, i // 4, i % 4)
			self._cards[day] = card_layout
		self._render()

	def clear(self):
		self.timetable = Timetable()
		self._render()

	def _add_entry(self):
		try:
			self.timetable.add(
				self.day_combo.currentText(),
				self.time_input.text(),
				self.subject_input.text(),
				self.topic_input.text(),
			)
		except ValidationError as e:
			self.notify.emit("error", e.message)
			return
		self.time_input.clear()
		self.subject_input.clear()
		self.topic_input.clear()
		self._render()
		self.notify.emit("success", "Entry added to timetable")

	def _remove_entry(self, entry_id):
		if self.timetable.remove(entry_id):
			self._render()
			self.notify.emit("success", "Entry removed")

	def _render(self):
		for day, entries in self.timetable.days():
			card_layout = self._cards[day]
			# keep the day header at index 0
			while card_layout.count() > 1:
				item = card_layout.takeAt(1)
				if item.widget() is not None:
					item.widget().deleteLater()
			if not entries:
				empty = QLabel("No sessions")
				empty.setObjectName("Muted")
				card_layout.addWidget(empty)
				continue
			for entry in entries:
				card_layout.addWidget(self._entry_widget(entry))

	def _entry_widget(self, entry):
		w = QWidget()
		lay = QHBoxLayout()
		lay.setContentsMargins(0, 4, 0, 4)
		text = QVBoxLayout()
		text.setSpacing(0)
		heading = f"{entry.time}  {entry.subject}" if entry.time else entry.subject
		subject = QLabel(heading)
		subject.setStyleSheet("font-weight: 600;")
		text.addWidget(subject)
		if entry.topic:
			topic = QLabel(entry.topic)
			topic.setObjectName("Muted")
			text.addWidget(topic)
		lay.addLayout(text, stretch=1)
		remove_btn = QPushButton("✕")
		remove_btn.setObjectName("GhostBtn")
		remove_btn.setToolTip("Remove entry")
		remove_btn.clicked.connect(lambda _=False, eid=entry.id: self._remove_entry(eid))
		lay.addWidget(remove_btn, alignment=Qt.AlignmentFlag.AlignTop)
		w.setLayout(lay)
		return w
