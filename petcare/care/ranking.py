"""提醒排序与截断：所有列表统一按 days_offset 升序（逾期最久的在前）。"""
import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from petcare.care.due import compute_reminder
from petcare.care.index import RecordIndex
from petcare.care.models import Pet, Reminder, TaskType
from petcare.config import PET_CARD_REMINDER_LIMIT

logger = logging.getLogger(__name__)


def rank(reminders: Iterable[Reminder]) -> List[Reminder]:
    """稳定排序，days_offset 相同保持原顺序。"""
    return sorted(reminders, key=lambda r: r.days_offset)


def truncate(reminders: List[Reminder], limit: Optional[int] = None) -> List[Reminder]:
    if limit is None or limit >= len(reminders):
        return list(reminders)
    return reminders[:max(0, limit)]


def reminders_for_pet(
    pet: Pet,
    task_types: Iterable[TaskType],
    index: RecordIndex,
    now: datetime,
    limit: Optional[int] = None,
) -> List[Reminder]:
    """某宠物所有周期事项的提醒；limit=None 即「展开全部」。"""
    out = []
    for task_type in task_types:
        if not task_type.is_cyclic:
            continue
        reminder = compute_reminder(pet, task_type, index.latest_for(pet.id, task_type.id), now)
        if reminder is not None:
            out.append(reminder)
    logger.debug("pet %s: %d reminders", pet.id, len(out))
    return truncate(rank(out), limit)


def card_summaries(
    pets: Iterable[Pet],
    task_types: Iterable[TaskType],
    index: RecordIndex,
    now: datetime,
    limit: Optional[int] = PET_CARD_REMINDER_LIMIT,
) -> Dict[str, List[Reminder]]:
    """宠物卡片摘要：每只宠物各自排序、各自截断。"""
    task_types = list(task_types)
    return {pet.id: reminders_for_pet(pet, task_types, index, now, limit) for pet in pets}
