"""Weekly work-hour register for shop workers and their wages."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

WAGE_PER_HOUR = 100
MIN_DAILY_HOURS = 0
MAX_DAILY_HOURS = 4
WORK_DATES = ("01-03-2020", "02-03-2020", "03-03-2020", "04-03-2020", "05-03-2020")
FIRST_ID = 100


class InvalidWorkHours(ValueError):
    """Raised when a day's work hours fall outside the allowed range."""


@dataclass(frozen=True)
class Worker:
    """One worker with the hours worked on each of the five dates."""

    worker_id: int
    name: str
    hours: tuple[int, ...] = field(default=())

    def __post_init__(self) -> None:
        hours = tuple(self.hours)
        object.__setattr__(self, "hours", hours)
        object.__setattr__(self, "name", self.name.rstrip("\n"))
        if len(hours) != len(WORK_DATES):
            raise InvalidWorkHours(
                f"expected hours for {len(WORK_DATES)} dates, got {len(hours)}"
            )
        if any(not MIN_DAILY_HOURS <= h <= MAX_DAILY_HOURS for h in hours):
            raise InvalidWorkHours(
                "Invalid Work Hour!! Make sure that work hours in the range "
                f"from {MIN_DAILY_HOURS} to {MAX_DAILY_HOURS}"
            )

    def total_hours(self) -> int:
        """Hours worked over all five dates."""
        return sum(self.hours)

    def wages(self) -> int:
        """Total wages at the fixed hourly rate."""
        return self.total_hours() * WAGE_PER_HOUR

    def report(self) -> str:
        """A printable summary of the worker's week."""
        lines = [
            f"Worker's ID No : {self.worker_id}",
            f"Name : {self.name}",
        ]
        lines.extend(
            f"Work Hours in {date} : {hours}"
            for date, hours in zip(WORK_DATES, self.hours)
        )
        lines.append(f"Total Working Hours : {self.total_hours()}")
        lines.append(f"Total Wages @Rs.{WAGE_PER_HOUR}/Hour : {self.wages()}")
        return "\n".join(lines)


def register_workers(
    entries: Iterable[tuple[str, Sequence[int]]], first_id: int = FIRST_ID
) -> list[Worker]:
    """Create workers from ``(name, hours)`` pairs with consecutive ids."""
    return [
        Worker(worker_id, name, tuple(hours))
        for worker_id, (name, hours) in enumerate(entries, start=first_id)
    ]