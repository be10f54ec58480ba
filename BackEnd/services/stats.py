from dataclasses import dataclass

LABEL_MAX = 20


@dataclass(frozen=True)
class ChartSlice:
	label: str
	full_title: str
	value: int
	share: float


def total_elapsed(tasks):
	"""Sum of committed elapsed_time across tasks, in seconds."""
	return sum(t.elapsed_time or 0 for t in tasks)


def short_label(title, limit=LABEL_MAX):
	return title[:limit] + "..." if len(title) > limit else title


def chart_slices(tasks):
	"""Per-task slices for the pie chart; tasks with no tracked time are left out."""
	tracked = [t for t in tasks if (t.elapsed_time or 0) > 0]
	total = sum(t.elapsed_time for t in tracked)
	return [
		ChartSlice(
			label=short_label(t.title),
			full_title=t.title,
			value=t.elapsed_time,
			share=t.elapsed_time / total,
		)
		for t in tracked
	]


def completion_counts(tasks):
	"""(active, completed, total) for the summary line under the list."""
	done = sum(1 for t in tasks if t.completed)
	return len(tasks) - done, done, len(tasks)
