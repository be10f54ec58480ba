from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from BackEnd.core.clock import format_duration
from BackEnd.services.stats import chart_slices, total_elapsed
from FrontEnd.styles.design_tokens import CHART_COLORS, palette

class TimeStatsView(QWidget):
	"""Total tracked time and a donut chart of time per task."""

	def __init__(self, parent=None):
		super().__init__(parent)
		self.theme = 'light'
		self._tasks = []
		layout = QVBoxLayout()
		layout.setAlignment(Qt.AlignmentFlag.AlignTop)
		layout.setContentsMargins(32, 32, 32, 32)
		layout.setSpacing(16)

		title = QLabel("Time Stats")
		title.setObjectName("PageTitle")
		layout.addWidget(title)

		total_card = QWidget()
		total_card.setObjectName("Card")
		total_card.setAttribute(Qt.WA_StyledBackground, True)
		card_layout = QVBoxLayout()
		caption = QLabel("Total Time Spent")
		caption.setObjectName("Muted")
		self.total_label = QLabel(format_duration(0))
		self.total_label.setStyleSheet("font-size: 30px; font-weight: 700;")
		card_layout.addWidget(caption)
		card_layout.addWidget(self.total_label)
		total_card.setLayout(card_layout)
		layout.addWidget(total_card)

		self.figure = Figure(figsize=(5, 3.2))
		self.canvas = FigureCanvas(self.figure)
		layout.addWidget(self.canvas, stretch=1)
		self.setLayout(layout)
		self._redraw()

	def set_tasks(self, tasks):
		self._tasks = list(tasks)
		self.total_label.setText(format_duration(total_elapsed(self._tasks)))
		self._redraw()

	def set_theme(self, theme):
		self.theme = theme
		self._redraw()

	def _redraw(self):
		c = palette(self.theme)
		slices = chart_slices(self._tasks)
		self.figure.clear()
		self.figure.patch.set_facecolor(c['background'])
		ax = self.figure.add_subplot(111)
		ax.set_facecolor(c['background'])
		ax.set_title("Time per Task", fontsize=14, fontweight='bold', color=c['text_strong'], pad=12)
		if not slices:
			ax.axis('off')
			ax.text(0.5, 0.5, "No time tracked yet", ha='center', va='center',
				fontsize=12, color=c['text_muted'], transform=ax.transAxes)
			self.canvas.draw()
			return
		colors = [CHART_COLORS[i % len(CHART_COLORS)] for i in range(len(slices))]
		wedges, _ = ax.pie(
			[s.value for s in slices],
			labels=[f"{s.label} ({s.share * 100:.0f}%)" for s in slices],
			colors=colors,
			startangle=90,
			counterclock=False,
			wedgeprops={'width': 0.38, 'edgecolor': c['background'], 'linewidth': 2},
			textprops={'color': c['text'], 'fontsize': 9},
		)
		ax.axis('equal')
		# full titles and durations live in the legend
		legend = ax.legend(
			wedges,
			[f"{s.full_title}: {format_duration(s.value)}" for s in slices],
			loc='center left', bbox_to_anchor=(1.0, 0.5), frameon=False, fontsize=9,
		)
		for text in legend.get_texts():
			text.set_color(c['text'])
		self.figure.tight_layout()
		self.canvas.draw()
