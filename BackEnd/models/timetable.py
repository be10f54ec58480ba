from dataclasses import dataclass

DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


@dataclass(frozen=True)
class TimetableEntry:
	id: str
	day: str
	time: str
	subject: str
	topic: str = ""
