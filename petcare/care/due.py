"""到期计算：下次到期日、状态与距今天数。"""
import logging
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional

from petcare.care.dates import local_day
from petcare.care.models import Pet, Record, Reminder, ReminderStatus, TaskType

logger = logging.getLogger(__name__)


class CalendarMarkKind(str, Enum):
    """日历上的提醒标记。"""
    DUE = "due"                      # 正好落在到期日
    STILL_OVERDUE = "still-overdue"  # 到期日已过，仍在今天显示


def next_due_date(last_record: Record, cycle_days: int) -> date:
    """按日历日相加，记录的具体时刻不影响到期日。"""
    return local_day(last_record.date) + timedelta(days=cycle_days)


def status_for_offset(days_offset: int) -> ReminderStatus:
    if days_offset < 0:
        return ReminderStatus.OVERDUE
    if days_offset == 0:
        return ReminderStatus.DUE_TODAY
    return ReminderStatus.UPCOMING


def compute_reminder(
    pet: Pet,
    task_type: TaskType,
    last_record: Optional[Record],
    now: datetime,
) -> Optional[Reminder]:
    """计算一条提醒。

    事项无周期或从未记录过都不产生提醒。days_offset 为到期日与 now 所在
    本地日的天数差，等价于 ceil((到期日零点 - now) / 1 天)。
    """
    if last_record is None:
        return None
    cycle = task_type.cycle_days
    if cycle is None:
        return None
    if cycle <= 0:
        logger.debug("task type %s has non-positive cycle %r, never due", task_type.id, cycle)
        return None
    due = next_due_date(last_record, cycle)
    offset = (due - local_day(now)).days
    return Reminder(
        pet=pet,
        task_type=task_type,
        last_record=last_record,
        next_due_date=due,
        days_offset=offset,
        status=status_for_offset(offset),
    )


def calendar_mark(reminder: Reminder, day: date, today: date) -> Optional[CalendarMarkKind]:
    """判断某天日历格是否显示该提醒。

    到期日当天标记 DUE；到期日已过且尚未重新记录时，今天的格子额外标记
    STILL_OVERDUE，两种标记同时存在。
    """
    if day == reminder.next_due_date:
        return CalendarMarkKind.DUE
    if day == today and reminder.next_due_date < today:
        return CalendarMarkKind.STILL_OVERDUE
    return None
