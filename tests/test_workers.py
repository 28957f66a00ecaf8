import pytest

from exercisekit.workers import (
    WAGE_PER_HOUR,
    InvalidWorkHours,
    Worker,
    register_workers,
)


def test_total_hours_is_sum_of_days():
    worker = Worker(100, "Asha", (1, 2, 3, 4, 0))
    assert worker.total_hours() == sum(worker.hours)


def test_wages_use_hourly_rate():
    worker = Worker(100, "Asha", (4, 4, 4, 4, 4))
    assert worker.wages() == worker.total_hours() * WAGE_PER_HOUR


def test_zero_hours_give_zero_wages():
    worker = Worker(100, "Asha", (0, 0, 0, 0, 0))
    assert worker.wages() == 0


@pytest.mark.parametrize("hours", [(5, 0, 0, 0, 0), (0, 0, -1, 0, 0)])
def test_out_of_range_hours_rejected(hours):
    with pytest.raises(InvalidWorkHours):
        Worker(100, "Asha", hours)


def test_wrong_number_of_days_rejected():
    with pytest.raises(InvalidWorkHours):
        Worker(100, "Asha", (1, 2, 3))


def test_name_newline_is_stripped():
    worker = Worker(100, "Asha\n", (1, 1, 1, 1, 1))
    assert worker.name == "Asha"


def test_register_assigns_consecutive_ids():
    workers = register_workers(
        [("Asha", (1, 1, 1, 1, 1)), ("Ben", (2, 2, 2, 2, 2))], first_id=100
    )
    assert [w.worker_id for w in workers] == [100, 101]
    assert [w.name for w in workers] == ["Asha", "Ben"]


def test_register_default_first_id():
    workers = register_workers([("Asha", (1, 1, 1, 1, 1))])
    assert workers[0].worker_id == 100


def test_register_propagates_invalid_hours():
    with pytest.raises(InvalidWorkHours):
        register_workers([("Asha", (9, 1, 1, 1, 1))])


def test_report_lines():
    worker = Worker(100, "Asha", (1, 2, 3, 4, 0))
    lines = worker.report().splitlines()
    assert lines[0] == "Worker's ID No : 100"
    assert lines[1] == "Name : Asha"
    assert lines[2] == "Work Hours in 01-03-2020 : 1"
    assert lines[-2] == f"Total Working Hours : {worker.total_hours()}"
    assert lines[-1] == f"Total Wages @Rs.100/Hour : {worker.wages()}"