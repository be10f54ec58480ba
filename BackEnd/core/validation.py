import re

from BackEnd.core.errors import ValidationError

EMAIL_MAX = 255
PASSWORD_MIN = 6
PASSWORD_MAX = 100

# local@domain.tld with no whitespace, no consecutive dots, no leading/trailing dot
_EMAIL_RE = re.compile(
	r"^(?!\.)(?!.*\.\.)([A-Za-z0-9_'+\-\.]*)[A-Za-z0-9_+\-]@([A-Za-z0-9][A-Za-z0-9\-]*\.)+[A-Za-z]{2,}$"
)

def is_valid_email(email: str) -> bool:
	return bool(_EMAIL_RE.match(email))

def validate_credentials(email: str, password: str) -> str:
	"""Check auth form fields before any network call.

	Returns the trimmed email. Raises ValidationError with the message of the
	first rule that fails (email rules first, then password rules).
	"""
	email = (email or "").strip()
	password = password or ""
	if not is_valid_email(email):
		raise ValidationError("Invalid email address")
	if len(email) > EMAIL_MAX:
		raise ValidationError(f"Email must be at most {EMAIL_MAX} characters")
	if len(password) < PASSWORD_MIN:
		raise ValidationError(f"Password must be at least {PASSWORD_MIN} characters")
	if len(password) > PASSWORD_MAX:
		raise ValidationError(f"Password must be at most {PASSWORD_MAX} characters")
	return email
