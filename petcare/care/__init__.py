"""护理提醒与日历聚合引擎。"""
from petcare.care.calendar_days import CalendarDay, CalendarFilter, CalendarMark, month_grid, shift_month
from petcare.care.due import CalendarMarkKind
from petcare.care.engine import CareEngine, calendar_day, notification_feed, reminder_for, reminders_for
from petcare.care.index import RecordIndex
from petcare.care.models import (
    CareSnapshot,
    Gender,
    Pet,
    PetType,
    Record,
    Reminder,
    ReminderStatus,
    TaskType,
    ValueSpec,
)

__all__ = [
    "CalendarDay",
    "CalendarFilter",
    "CalendarMark",
    "CalendarMarkKind",
    "CareEngine",
    "CareSnapshot",
    "Gender",
    "Pet",
    "PetType",
    "Record",
    "RecordIndex",
    "Reminder",
    "ReminderStatus",
    "TaskType",
    "ValueSpec",
    "calendar_day",
    "month_grid",
    "notification_feed",
    "reminder_for",
    "reminders_for",
    "shift_month",
]
