"""日历聚合：每天的记录、到期提醒与生日。

每次查询都从快照重新计算，切换筛选或翻月不依赖任何缓存状态。
"""
import calendar
import logging
from datetime import date, datetime
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from petcare.care.dates import local_day
from petcare.care.due import CalendarMarkKind, calendar_mark, compute_reminder
from petcare.care.index import RecordIndex
from petcare.care.models import CareSnapshot, Pet, Record, Reminder
from petcare.config import WEEK_FIRST_DAY

logger = logging.getLogger(__name__)


class CalendarFilter(BaseModel):
    """日历筛选；None 表示全部。"""
    pet_id: Optional[str] = Field(None, description="宠物 ID")
    task_type_id: Optional[str] = Field(None, description="事项 ID")

    model_config = ConfigDict(frozen=True)


class CalendarMark(BaseModel):
    """落在某天的提醒。"""
    kind: CalendarMarkKind
    reminder: Reminder

    model_config = ConfigDict(use_enum_values=True, frozen=True)


class CalendarDay(BaseModel):
    """一天的三类内容及圆点颜色（按类别去重）。"""
    day: Optional[date] = None
    records: Tuple[Record, ...] = ()
    reminders: Tuple[CalendarMark, ...] = ()
    birthdays: Tuple[Pet, ...] = ()
    record_colors: Tuple[str, ...] = ()
    reminder_colors: Tuple[str, ...] = ()
    birthday_colors: Tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)

    @property
    def total(self) -> int:
        return len(self.records) + len(self.reminders) + len(self.birthdays)

    @property
    def is_empty(self) -> bool:
        return self.total == 0


def _unique(colors) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(colors))


def resolve_day(year: int, month: int, day: Optional[int]) -> Optional[date]:
    """该月没有这一天（如 2 月 30 日）时返回 None。"""
    if day is None:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        return None


def month_grid(year: int, month: int) -> List[Optional[int]]:
    """月历格子：首日之前补 None，周日为第一列。"""
    first_weekday, days_in_month = calendar.monthrange(year, month)
    leading = (first_weekday - WEEK_FIRST_DAY) % 7
    return [None] * leading + list(range(1, days_in_month + 1))


def shift_month(year: int, month: int, selected_day: Optional[int], delta: int) -> Tuple[int, int, Optional[int]]:
    """翻月并尽量保留选中的日；目标月没有这一天则不选中。"""
    index = year * 12 + (month - 1) + delta
    new_year, new_month = divmod(index, 12)
    new_month += 1
    if resolve_day(new_year, new_month, selected_day) is None:
        return new_year, new_month, None
    return new_year, new_month, selected_day


def _day_records(index: RecordIndex, snapshot: CareSnapshot, day: date, flt: CalendarFilter) -> List[Record]:
    out = []
    for record in index.all_on(day, flt.pet_id, flt.task_type_id):
        if snapshot.pet(record.pet_id) is None or snapshot.task_type(record.task_type_id) is None:
            logger.debug("skip orphan record %s", record.id)
            continue
        out.append(record)
    return out


def _day_marks(
    index: RecordIndex,
    snapshot: CareSnapshot,
    day: date,
    flt: CalendarFilter,
    now: datetime,
) -> List[CalendarMark]:
    today = local_day(now)
    marks = []
    for pet in snapshot.pets:
        if flt.pet_id is not None and pet.id != flt.pet_id:
            continue
        for task_type in snapshot.cyclic_task_types():
            if flt.task_type_id is not None and task_type.id != flt.task_type_id:
                continue
            reminder = compute_reminder(pet, task_type, index.latest_for(pet.id, task_type.id), now)
            if reminder is None:
                continue
            kind = calendar_mark(reminder, day, today)
            if kind is not None:
                marks.append(CalendarMark(kind=kind, reminder=reminder))
    return marks


def _day_birthdays(snapshot: CareSnapshot, day: date, flt: CalendarFilter) -> List[Pet]:
    return [
        p for p in snapshot.pets
        if (flt.pet_id is None or p.id == flt.pet_id)
        and p.birthday.month == day.month and p.birthday.day == day.day
    ]


def calendar_day(
    year: int,
    month: int,
    day: Optional[int],
    snapshot: CareSnapshot,
    flt: Optional[CalendarFilter],
    now: datetime,
    index: Optional[RecordIndex] = None,
) -> CalendarDay:
    """某天的记录、到期提醒与生日；无效日期返回空结果。"""
    target = resolve_day(year, month, day)
    if target is None:
        return CalendarDay()
    flt = flt or CalendarFilter()
    index = index or RecordIndex(snapshot.records)

    records = _day_records(index, snapshot, target, flt)
    marks = _day_marks(index, snapshot, target, flt, now)
    birthdays = _day_birthdays(snapshot, target, flt)

    # 孤立记录已被排除，这里的宠物一定存在
    return CalendarDay(
        day=target,
        records=tuple(records),
        reminders=tuple(marks),
        birthdays=tuple(birthdays),
        record_colors=_unique(snapshot.pet(r.pet_id).theme_color for r in records),
        reminder_colors=_unique(m.reminder.task_type.color for m in marks),
        birthday_colors=_unique(p.theme_color for p in birthdays),
    )


def month_view(
    year: int,
    month: int,
    snapshot: CareSnapshot,
    flt: Optional[CalendarFilter],
    now: datetime,
    index: Optional[RecordIndex] = None,
) -> List[CalendarDay]:
    """整月每一天的聚合结果，索引只建一次。"""
    index = index or RecordIndex(snapshot.records)
    _, days_in_month = calendar.monthrange(year, month)
    return [
        calendar_day(year, month, d, snapshot, flt, now, index=index)
        for d in range(1, days_in_month + 1)
    ]
