import logging

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton

from BackEnd.core.errors import ValidationError
from BackEnd.core.validation import EMAIL_MAX, PASSWORD_MAX, validate_credentials

log = logging.getLogger(__name__)

class AuthPage(QWidget):
	"""Sign in / sign up form.

	Field checks run here before any network call; the actual auth call is
	handed to the window through ``submitted`` so it can run off the GUI thread.
	"""
	submitted = Signal(str, str, bool)  # email, password, is_login
	notify = Signal(str, str)

	def __init__(self, parent=None):
		super().__init__(parent)
		self.is_login = True

		outer = QVBoxLayout()
		outer.addStretch()
		card = QWidget()
		card.setObjectName("Card")
		card.setAttribute(Qt.WA_StyledBackground, True)
		card.setFixedWidth(420)
		lay = QVBoxLayout()
		lay.setContentsMargins(32, 32, 32, 32)
		lay.setSpacing(12)

		app_title = QLabel("Study Planner")
		app_title.setObjectName("PageTitle")
		app_title.setAlignment(Qt.AlignmentFlag.AlignCenter)
		lay.addWidget(app_title)
		tagline = QLabel("Organize your learning journey")
		tagline.setObjectName("Muted")
		tagline.setAlignment(Qt.AlignmentFlag.AlignCenter)
		lay.addWidget(tagline)

		self.heading = QLabel()
		self.heading.setAlignment(Qt.AlignmentFlag.AlignCenter)
		self.heading.setStyleSheet("font-size: 20px; font-weight: 700;")
		lay.addWidget(self.heading)
		self.subheading = QLabel()
		self.subheading.setObjectName("Muted")
		self.subheading.setAlignment(Qt.AlignmentFlag.AlignCenter)
		lay.addWidget(self.subheading)

		lay.addWidget(QLabel("Email Address"))
		self.email_input = QLineEdit()
		self.email_input.setPlaceholderText("student@example.com")
		self.email_input.setMaxLength(EMAIL_MAX)
		lay.addWidget(self.email_input)

		lay.addWidget(QLabel("Password"))
		pw_row = QHBoxLayout()
		self.password_input = QLineEdit()
		self.password_input.setEchoMode(QLineEdit.Password)
		self.password_input.setMaxLength(PASSWORD_MAX)
		self.password_input.returnPressed.connect(self._submit)
		self.show_pw_btn = QPushButton("Show")
		self.show_pw_btn.setObjectName("GhostBtn")
		self.show_pw_btn.clicked.connect(self._toggle_password)
		pw_row.addWidget(self.password_input, stretch=1)
		pw_row.addWidget(self.show_pw_btn)
		lay.addLayout(pw_row)
		self.pw_hint = QLabel("Password must be at least 6 characters")
		self.pw_hint.setObjectName("Muted")
		lay.addWidget(self.pw_hint)

		self.submit_btn = QPushButton()
		self.submit_btn.setMinimumHeight(44)
		self.submit_btn.clicked.connect(self._submit)
		lay.addWidget(self.submit_btn)

		self.mode_btn = QPushButton()
		self.mode_btn.setObjectName("LinkBtn")
		self.mode_btn.clicked.connect(self._toggle_mode)
		lay.addWidget(self.mode_btn, alignment=Qt.AlignmentFlag.AlignHCenter)

		card.setLayout(lay)
		outer.addWidget(card, alignment=Qt.AlignmentFlag.AlignHCenter)
		outer.addStretch()
		self.setLayout(outer)
		self._apply_mode()

	def set_loading(self, loading):
		self.submit_btn.setEnabled(not loading)
		if loading:
			self.submit_btn.setText("Processing...")
		else:
			self._apply_mode()

	def reset(self):
		self.password_input.clear()
		self.set_loading(False)

	def _apply_mode(self):
		if self.is_login:
			self.heading.setText("Welcome Back")
			self.subheading.setText("Sign in to continue your studies")
			self.submit_btn.setText("Sign In")
			self.mode_btn.setText("Don't have an account? Sign up here")
		else:
			self.heading.setText("Get Started")
			self.subheading.setText("Create an account to start planning")
			self.submit_btn.setText("Create Account")
			self.mode_btn.setText("Already have an account? Sign in here")
		self.pw_hint.setVisible(not self.is_login)

	def _toggle_mode(self):
		self.is_login = not self.is_login
		self._apply_mode()

	def _toggle_password(self):
		hidden = self.password_input.echoMode() == QLineEdit.Password
		self.password_input.setEchoMode(QLineEdit.Normal if hidden else QLineEdit.Password)
		self.show_pw_btn.setText("Hide" if hidden else "Show")

	def _submit(self):
		password = self.password_input.text()
		try:
			email = validate_credentials(self.email_input.text(), password)
		except ValidationError as e:
			log.debug("Auth form rejected: %s", e.message)
			self.notify.emit("error", e.message)
			return
		self.set_loading(True)
		self.submitted.emit(email, password, self.is_login)
