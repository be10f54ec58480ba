from PySide6.QtWidgets import (
	QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QListWidget,
	QStackedWidget, QListWidgetItem, QLineEdit, QScrollArea, QCheckBox, QDateEdit
)
from PySide6.QtCore import Qt, QDate, Signal, Slot
import datetime
import logging
from BackEnd.core.paths import settings_path
from BackEnd.services import preferences
from BackEnd.services.stats import completion_counts
from FrontEnd.components.task_row import TaskRow
from FrontEnd.components.time_stats import TimeStatsView
from FrontEnd.components.timetable_view import TimetableView
from FrontEnd.components.toast import Toast
from FrontEnd.pages.auth_page import AuthPage
from FrontEnd.styles.design_tokens import build_stylesheet
from FrontEnd.workers import LatestCall, TaskRunner

log = logging.getLogger(__name__)

AUTH_PAGE = 0
DASHBOARD_PAGE = 1


class MainWindow(QMainWindow):
	# session changes arrive on whatever thread made the auth call
	_session_received = Signal(object)

	def __init__(self, auth, repo, settings=None):
		super().__init__()
		self.auth = auth
		self.repo = repo
		self.settings = settings
		self.todos = []
		self._rows = []
		self._subscription = None
		self.setWindowTitle("Study Planner")
		self.resize(1100, 720)

		self.runner = TaskRunner(self)
		self._todo_loads = LatestCall()
		self._session_received.connect(self._on_session)

		self._settings_file = settings_path(settings.data_dir) if settings is not None else None
		self.theme = preferences.load_theme(self._settings_file)
		self.setStyleSheet(build_stylesheet(self.theme))

		self.auth_page = AuthPage()
		self.auth_page.submitted.connect(self._on_auth_submitted)
		self.auth_page.notify.connect(self._notify)

		self.root_stack = QStackedWidget()
		self.root_stack.addWidget(self.auth_page)
		self.root_stack.addWidget(self._build_dashboard())
		self.setCentralWidget(self.root_stack)

		self.toast = Toast(self)
		self.root_stack.setCurrentIndex(AUTH_PAGE)

	# ---- lifecycle ----

	def showEvent(self, event):
		if self._subscription is None:
			self._subscription = self.auth.subscribe(self._session_received.emit)
			self._restore_session()
		super().showEvent(event)

	def closeEvent(self, event):
		if self._subscription is not None:
			self._subscription.unsubscribe()
			self._subscription = None
		self._clear_rows()
		super().closeEvent(event)

	def _restore_session(self):
		if self.settings is not None and not self.settings.backend_configured:
			self._notify("error", "Backend is not configured: set SUPABASE_URL and SUPABASE_ANON_KEY")
			return
		session = self.auth.current_session()
		if session is not None:
			self._on_session(session)
			return
		self.auth_page.set_loading(True)
		self.runner.run(
			self.auth.restore,
			on_success=lambda s: self.auth_page.set_loading(False),
			on_error=self._on_restore_failed,
		)

	def _on_restore_failed(self, message):
		self.auth_page.set_loading(False)
		self._notify("error", message)

	@Slot(object)
	def _on_session(self, session):
		if session is None:
			log.info("No session; showing sign in")
			self._todo_loads.invalidate()
			self._clear_rows()
			self.todos = []
			self.stats_view.set_tasks([])
			self.timetable_view.clear()
			self.auth_page.reset()
			self.root_stack.setCurrentIndex(AUTH_PAGE)
			return
		self.email_label.setText(session.email)
		self.root_stack.setCurrentIndex(DASHBOARD_PAGE)
		self._refresh_todos()

	# ---- layout ----

	def _build_dashboard(self):
		w = QWidget()

		header = QHBoxLayout()
		header.setContentsMargins(24, 16, 24, 16)
		title_col = QVBoxLayout()
		title_col.setSpacing(0)
		app_title = QLabel("TaskFlow")
		app_title.setObjectName("PageTitle")
		self.email_label = QLabel("")
		self.email_label.setObjectName("Muted")
		title_col.addWidget(app_title)
		title_col.addWidget(self.email_label)
		header.addLayout(title_col)
		header.addStretch()
		self.theme_btn = QPushButton()
		self.theme_btn.setObjectName("GhostBtn")
		self.theme_btn.setToolTip("Toggle theme")
		self.theme_btn.clicked.connect(self._toggle_theme)
		self._update_theme_button()
		sign_out_btn = QPushButton("Sign out")
		sign_out_btn.setObjectName("GhostBtn")
		sign_out_btn.clicked.connect(self._sign_out)
		header.addWidget(self.theme_btn)
		header.addWidget(sign_out_btn)

		self.sidebar = QListWidget()
		self.sidebar.setObjectName("Sidebar")
		self.sidebar.setFixedWidth(200)
		self.sidebar.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
		self.sidebar.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
		self.sidebar.addItem(QListWidgetItem("Tasks"))
		self.sidebar.addItem(QListWidgetItem("Time Stats"))
		self.sidebar.addItem(QListWidgetItem("Timetable"))

		self.stack = QStackedWidget()
		self.tasks_tab = self._build_tasks_tab()
		self.stats_view = TimeStatsView()
		self.stats_view.set_theme(self.theme)
		self.timetable_view = TimetableView()
		self.timetable_view.notify.connect(self._notify)
		self.stack.addWidget(self.tasks_tab)
		self.stack.addWidget(self.stats_view)
		self.stack.addWidget(self.timetable_view)
		self.sidebar.currentRowChanged.connect(self.stack.setCurrentIndex)
		self.sidebar.setCurrentRow(0)

		body = QHBoxLayout()
		body.setContentsMargins(0, 0, 0, 0)
		body.setSpacing(0)
		body.addWidget(self.sidebar)
		body.addWidget(self.stack, stretch=1)

		layout = QVBoxLayout()
		layout.setContentsMargins(0, 0, 0, 0)
		layout.setSpacing(0)
		layout.addLayout(header)
		layout.addLayout(body, stretch=1)
		w.setLayout(layout)
		return w

	def _build_tasks_tab(self):
		w = QWidget()
		outer = QVBoxLayout()
		outer.setContentsMargins(32, 24, 32, 24)
		outer.setSpacing(12)

		# Add form: title row, then optional due date row
		add_row = QHBoxLayout()
		self.todo_add_input = QLineEdit()
		self.todo_add_input.setPlaceholderText("What needs to be done?")
		self.todo_add_input.returnPressed.connect(self._add_todo)
		self.todo_add_btn = QPushButton("+ Add")
		self.todo_add_btn.clicked.connect(self._add_todo)
		add_row.addWidget(self.todo_add_input, stretch=1)
		add_row.addWidget(self.todo_add_btn)
		outer.addLayout(add_row)

		due_row = QHBoxLayout()
		self.due_check = QCheckBox("Add due date (optional)")
		self.due_edit = QDateEdit()
		self.due_edit.setCalendarPopup(True)
		self.due_edit.setDisplayFormat("MMM d, yyyy")
		self.due_edit.setDate(QDate.currentDate())
		self.due_edit.setEnabled(False)
		self.due_check.toggled.connect(self.due_edit.setEnabled)
		due_row.addWidget(self.due_check)
		due_row.addWidget(self.due_edit)
		due_row.addStretch()
		outer.addLayout(due_row)

		scroll = QScrollArea()
		scroll.setObjectName("TodoScrollArea")
		scroll.setWidgetResizable(True)
		scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
		scroll.setFrameShape(QScrollArea.NoFrame)
		content = QWidget()
		self.todo_layout = QVBoxLayout()
		self.todo_layout.setContentsMargins(0, 0, 0, 0)
		self.todo_layout.setSpacing(8)
		self.todo_layout.setAlignment(Qt.AlignmentFlag.AlignTop)
		content.setLayout(self.todo_layout)
		scroll.setWidget(content)
		outer.addWidget(scroll, stretch=1)

		self.empty_label = QLabel("No todos yet. Add one to get started!")
		self.empty_label.setObjectName("Muted")
		self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		outer.addWidget(self.empty_label)

		self.summary_label = QLabel("")
		self.summary_label.setObjectName("Muted")
		outer.addWidget(self.summary_label)

		w.setLayout(outer)
		return w

	# ---- notifications ----

	@Slot(str, str)
	def _notify(self, variant, message):
		self.toast.show_message(message, variant)

	def _on_remote_error(self, message):
		self._notify("error", message)

	def _on_write_failed(self, message):
		"""A write failed: show why and reload what the backend actually holds."""
		self._notify("error", message)
		self._render_todos()
		self._refresh_todos()

	# ---- auth ----

	@Slot(str, str, bool)
	def _on_auth_submitted(self, email, password, is_login):
		if is_login:
			self.runner.run(
				self.auth.sign_in, email, password,
				on_success=lambda s: self._notify("success", "Welcome back! Successfully logged in."),
				on_error=self._on_auth_failed,
			)
		else:
			self.runner.run(self.auth.sign_up, email, password, on_success=self._on_signed_up, on_error=self._on_auth_failed)

	def _on_signed_up(self, session):
		self.auth_page.set_loading(False)
		if session is None:
			self._notify("success", "Account created! Check your email to confirm it, then sign in.")
		else:
			self._notify("success", "Account created! You're all set.")

	def _on_auth_failed(self, message):
		self.auth_page.set_loading(False)
		self._notify("error", message or "An error occurred during authentication.")

	def _sign_out(self):
		self.runner.run(self.auth.sign_out, on_error=self._on_remote_error)

	# ---- tasks ----

	def _refresh_todos(self):
		if self.auth.current_session() is None:
			return
		ticket = self._todo_loads.issue()
		self.runner.run(self.repo.list_todos, on_success=lambda todos: self._set_todos(ticket, todos), on_error=self._on_remote_error)

	def _set_todos(self, ticket, todos):
		if not self._todo_loads.is_current(ticket):
			log.debug("Dropping superseded todo list")
			return
		self.todos = todos
		self._render_todos()
		self.stats_view.set_tasks(todos)

	def _clear_rows(self):
		for row in self._rows:
			row.teardown()
			self.todo_layout.removeWidget(row)
			row.deleteLater()
		self._rows = []

	def _render_todos(self):
		self._clear_rows()
		now = datetime.datetime.now().astimezone()
		for task in self.todos:
			row = TaskRow(task, now)
			row.toggle_requested.connect(self._toggle_todo)
			row.delete_requested.connect(self._delete_todo)
			row.timer_requested.connect(self._timer_action)
			self.todo_layout.addWidget(row)
			self._rows.append(row)
		self.empty_label.setVisible(not self.todos)
		active, done, total = completion_counts(self.todos)
		self.summary_label.setVisible(bool(self.todos))
		self.summary_label.setText(f"{active} active   ·   {done} completed   ·   {total} total")

	def _selected_due_date(self):
		if not self.due_check.isChecked():
			return None
		d = self.due_edit.date()
		return datetime.datetime(d.year(), d.month(), d.day()).astimezone()

	def _add_todo(self):
		title = self.todo_add_input.text().strip()
		if not title or self.auth.current_session() is None:
			return
		self.todo_add_btn.setEnabled(False)
		self.runner.run(
			self.repo.add_todo, title, self._selected_due_date(),
			on_success=self._on_todo_added,
			on_error=self._on_add_failed,
		)

	def _on_todo_added(self, task):
		self.todo_add_btn.setEnabled(True)
		self.todo_add_input.clear()
		self.due_check.setChecked(False)
		self.due_edit.setDate(QDate.currentDate())
		self._notify("success", "Todo added!")
		self._refresh_todos()

	def _on_add_failed(self, message):
		self.todo_add_btn.setEnabled(True)
		self._notify("error", message)

	def _toggle_todo(self, task):
		self.runner.run(self.repo.toggle_completed, task, on_success=lambda t: self._refresh_todos(), on_error=self._on_write_failed)

	def _delete_todo(self, task):
		self.runner.run(
			self.repo.delete_todo, task.id,
			on_success=lambda _: (self._notify("success", "Todo deleted"), self._refresh_todos()),
			on_error=self._on_write_failed,
		)

	def _timer_action(self, action, task):
		# the row keeps showing the old state until the write lands
		self.runner.run(self.repo.apply_timer, action, task, on_success=lambda t: self._refresh_todos(), on_error=self._on_write_failed)

	# ---- theme ----

	def _update_theme_button(self):
		self.theme_btn.setText("☀ Light" if self.theme == 'dark' else "☾ Dark")

	def _toggle_theme(self):
		self.theme = 'light' if self.theme == 'dark' else 'dark'
		self.setStyleSheet(build_stylesheet(self.theme))
		self.stats_view.set_theme(self.theme)
		self._update_theme_button()
		try:
			preferences.save_theme(self.theme, self._settings_file)
		except OSError as e:
			log.warning("Could not save theme: %s", e)
