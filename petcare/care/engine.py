"""引擎入口：对一份快照提供所有查询，各页面都从这里取数。

所有查询都是快照上的纯函数；now 只在这一层缺省为当前时间。
"""
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from petcare.care.calendar_days import (
    CalendarDay,
    CalendarFilter,
    calendar_day as _calendar_day,
    month_view as _month_view,
)
from petcare.care.due import compute_reminder
from petcare.care.feed import notification_feed as _notification_feed
from petcare.care.index import RecordIndex
from petcare.care.models import CareSnapshot, Pet, Record, Reminder, TaskType
from petcare.care.ranking import card_summaries as _card_summaries
from petcare.care.ranking import reminders_for_pet
from petcare.care.timeline import latest_weight, pet_timeline, weight_series
from petcare.config import PET_CARD_REMINDER_LIMIT, PET_DETAIL_REMINDER_LIMIT


def _now(now: Optional[datetime]) -> datetime:
    return now if now is not None else datetime.now()


class CareEngine:
    """某一快照上的提醒与日历查询。"""

    def __init__(self, snapshot: CareSnapshot):
        self.snapshot = snapshot
        self.index = RecordIndex(snapshot.records)

    @classmethod
    def from_collections(
        cls,
        pets: Iterable[Pet],
        task_types: Iterable[TaskType],
        records: Iterable[Record],
    ) -> "CareEngine":
        return cls(CareSnapshot(pets=tuple(pets), task_types=tuple(task_types), records=tuple(records)))

    def reminder_for(self, pet: Pet, task_type: TaskType, now: Optional[datetime] = None) -> Optional[Reminder]:
        """单个宠物单个事项的提醒；无周期或无记录返回 None。"""
        if not task_type.is_cyclic:
            return None
        last = self.index.latest_for(pet.id, task_type.id)
        return compute_reminder(pet, task_type, last, _now(now))

    def reminders_for(self, pet: Pet, now: Optional[datetime] = None, limit: Optional[int] = None) -> List[Reminder]:
        """宠物详情页的提醒列表，按紧急程度排序。"""
        return reminders_for_pet(pet, self.snapshot.task_types, self.index, _now(now), limit)

    def detail_reminders(self, pet: Pet, now: Optional[datetime] = None, expanded: bool = False) -> List[Reminder]:
        """宠物详情页默认只显示前几条，「展开」后重新查询全部。"""
        limit = None if expanded else PET_DETAIL_REMINDER_LIMIT
        return self.reminders_for(pet, now, limit)

    def card_summaries(
        self,
        now: Optional[datetime] = None,
        limit: Optional[int] = PET_CARD_REMINDER_LIMIT,
    ) -> Dict[str, List[Reminder]]:
        return _card_summaries(self.snapshot.pets, self.snapshot.task_types, self.index, _now(now), limit)

    def notification_feed(self, now: Optional[datetime] = None) -> List[Reminder]:
        return _notification_feed(self.snapshot, _now(now), index=self.index)

    def calendar_day(
        self,
        year: int,
        month: int,
        day: Optional[int],
        pet_filter: Optional[str] = None,
        task_filter: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> CalendarDay:
        flt = CalendarFilter(pet_id=pet_filter, task_type_id=task_filter)
        return _calendar_day(year, month, day, self.snapshot, flt, _now(now), index=self.index)

    def month_view(
        self,
        year: int,
        month: int,
        pet_filter: Optional[str] = None,
        task_filter: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> List[CalendarDay]:
        flt = CalendarFilter(pet_id=pet_filter, task_type_id=task_filter)
        return _month_view(year, month, self.snapshot, flt, _now(now), index=self.index)

    def timeline(self, pet_id: str, task_type_id: Optional[str] = None) -> List[Record]:
        return pet_timeline(self.index, pet_id, task_type_id)

    def weight_series(self, pet_id: str):
        return weight_series(self.index, pet_id)

    def latest_weight(self, pet: Pet) -> float:
        return latest_weight(self.index, pet)


def reminder_for(
    pet: Pet,
    task_type: TaskType,
    records: Iterable[Record],
    now: Optional[datetime] = None,
) -> Optional[Reminder]:
    return CareEngine.from_collections([pet], [task_type], records).reminder_for(pet, task_type, now)


def reminders_for(
    pet: Pet,
    task_types: Iterable[TaskType],
    records: Iterable[Record],
    now: Optional[datetime] = None,
    limit: Optional[int] = None,
) -> List[Reminder]:
    return CareEngine.from_collections([pet], task_types, records).reminders_for(pet, now, limit)


def notification_feed(
    pets: Iterable[Pet],
    task_types: Iterable[TaskType],
    records: Iterable[Record],
    now: Optional[datetime] = None,
) -> List[Reminder]:
    return CareEngine.from_collections(pets, task_types, records).notification_feed(now)


def calendar_day(
    year: int,
    month: int,
    day: Optional[int],
    pets: Iterable[Pet],
    task_types: Iterable[TaskType],
    records: Iterable[Record],
    pet_filter: Optional[str] = None,
    task_filter: Optional[str] = None,
    now: Optional[datetime] = None,
) -> CalendarDay:
    engine = CareEngine.from_collections(pets, task_types, records)
    return engine.calendar_day(year, month, day, pet_filter, task_filter, now)
