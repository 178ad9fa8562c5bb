from __future__ import annotations

from datetime import date, datetime, time

import pytest

from src.jinji_system.jinji_system.attendance.model import AttendanceDay, LeaveDay
from src.jinji_system.jinji_system.attendance.service import AttendanceService
from src.jinji_system.jinji_system.core.enums import DayKind, LeaveType
from src.jinji_system.jinji_system.core.exceptions import NotFoundError, OutOfWindowError, StoreFailure, ValidationError

KEY = (12345, date(2024, 6, 10))


@pytest.fixture(autouse=True)
def employees(seed_employee):
    seed_employee(12345)
    seed_employee(54321)


@pytest.fixture
def service(store, june_now):
    return AttendanceService(store, clock=lambda: june_now)


def test_attendance_replaces_leave(store, service):
    service.record_day(12345, "2024-06-10", DayKind.LEAVE, leave_type=1)
    service.record_day(12345, "2024-06-10", DayKind.ATTENDANCE, start_time="09:00", end_time="18:00")

    assert KEY not in store.rows("leave_days")
    assert store.rows("attendance_days")[KEY]["start_time"] == time(9, 0)
    assert store.rows("attendance_days")[KEY]["end_time"] == time(18, 0)


def test_leave_replaces_attendance(store, service):
    service.record_attendance(12345, "2024-06-10", start_time="09:00", end_time="18:00")
    day = service.record_leave(12345, "2024-06-10", leave_type=4)

    assert day == LeaveDay(employee_id=12345, work_date=date(2024, 6, 10), leave_type=LeaveType.CHILDCARE)
    assert KEY not in store.rows("attendance_days")
    assert store.rows("leave_days")[KEY]["leave_type"] == 4


def test_at_most_one_record_per_day_after_any_sequence(store, service):
    kinds = ["leave", "attendance", "attendance", "leave", "leave", "attendance"]
    for kind in kinds:
        if kind == "leave":
            service.record_day(12345, "2024-06-10", kind, leave_type=7)
        else:
            service.record_day(12345, "2024-06-10", kind, start_time="10:00")
        assert (KEY in store.rows("attendance_days")) + (KEY in store.rows("leave_days")) == 1


def test_attendance_upsert_overwrites_times(store, service):
    service.record_attendance(12345, "2024-06-10", start_time="09:00")
    service.record_attendance(12345, "2024-06-10", start_time="08:30", end_time="19:00")

    row = store.rows("attendance_days")[KEY]
    assert (row["start_time"], row["end_time"]) == (time(8, 30), time(19, 0))
    assert len(store.rows("attendance_days")) == 1


def test_end_time_alone_is_accepted(service):
    day = service.record_attendance(12345, "2024-06-10", end_time="17:45")
    assert day == AttendanceDay(employee_id=12345, work_date=date(2024, 6, 10), start_time=None, end_time=time(17, 45))


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(employee_id=0, work_date="2024-06-10", kind="attendance", start_time="09:00"),
        dict(employee_id=12345, work_date="2024/06/10", kind="attendance", start_time="09:00"),
        dict(employee_id=12345, work_date="2024-06-31", kind="attendance", start_time="09:00"),
        dict(employee_id=12345, work_date="2024-06-10", kind="attendance"),
        dict(employee_id=12345, work_date="2024-06-10", kind="attendance", start_time="9am"),
        dict(employee_id=12345, work_date="2024-06-10", kind="attendance", start_time="18:00", end_time="09:00"),
        dict(employee_id=12345, work_date="2024-06-10", kind="leave", leave_type=9),
        dict(employee_id=12345, work_date="2024-06-10", kind="leave", leave_type=None),
        dict(employee_id=12345, work_date="2024-06-10", kind="holiday"),
        dict(employee_id=12345, work_date=20240610, kind="attendance", start_time="09:00"),
        dict(employee_id=12345, work_date="2024-06-10", kind="attendance", start_time=900),
        dict(employee_id=12345, work_date="2024-06-10", kind="attendance", start_time="09:00", end_time=18.0),
    ],
)
def test_invalid_input_is_rejected(store, service, kwargs):
    employee_id = kwargs.pop("employee_id")
    work_date = kwargs.pop("work_date")
    kind = kwargs.pop("kind")

    with pytest.raises(ValidationError):
        service.record_day(employee_id, work_date, kind, **kwargs)
    assert store.transactions == 0


def test_closed_month_is_rejected(store):
    service = AttendanceService(store, clock=lambda: datetime(2024, 6, 10, 9, 0))

    with pytest.raises(OutOfWindowError) as exc:
        service.record_leave(12345, "2024-05-20", leave_type=1)

    assert exc.value.deadline == date(2024, 6, 7)
    assert store.rows("leave_days") == {}


def test_prior_month_open_before_deadline(store):
    service = AttendanceService(store, clock=lambda: datetime(2024, 6, 5, 9, 0))
    service.record_leave(12345, "2024-05-20", leave_type=1)

    assert (12345, date(2024, 5, 20)) in store.rows("leave_days")


def test_failed_write_leaves_previous_state(store, service):
    service.record_leave(12345, "2024-06-10", leave_type=1)
    store.fail_on_upsert = "attendance_days"

    with pytest.raises(StoreFailure):
        service.record_attendance(12345, "2024-06-10", start_time="09:00")

    assert store.rows("leave_days")[KEY]["leave_type"] == 1
    assert KEY not in store.rows("attendance_days")


def test_list_days_by_month_sorted_and_disjoint(store, service):
    service.record_attendance(12345, "2024-06-12", start_time="09:00", end_time="18:00")
    service.record_leave(12345, "2024-06-03", leave_type=1)
    service.record_attendance(12345, "2024-06-04", start_time="09:00")
    service.record_leave(12345, "2024-06-11", leave_type=5)
    store.seed("attendance_days", (12345, date(2024, 5, 31)), start_time=time(9, 0), end_time=None)
    service.record_attendance(54321, "2024-06-05", start_time="09:00")

    days = service.list_days(12345, "202406")

    assert [d.work_date.day for d in days.attendance_days] == [4, 12]
    assert [d.work_date.day for d in days.leave_days] == [3, 11]
    assert {d.work_date for d in days.attendance_days}.isdisjoint({d.work_date for d in days.leave_days})


def test_list_days_empty_month(service):
    days = service.list_days(12345, "2024-02")
    assert days.attendance_days == [] and days.leave_days == []


def test_unknown_employee_is_not_found(store, service):
    with pytest.raises(NotFoundError):
        service.record_attendance(99999, "2024-06-10", start_time="09:00")

    assert store.rows("attendance_days") == {}
