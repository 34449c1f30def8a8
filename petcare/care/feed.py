"""提醒中心：跨宠物、跨事项，只列今日到期与已逾期。"""
import logging
from datetime import datetime
from typing import List, Optional

from petcare.care.due import compute_reminder
from petcare.care.index import RecordIndex
from petcare.care.models import CareSnapshot, Reminder, ReminderStatus

logger = logging.getLogger(__name__)

ACTIONABLE = (ReminderStatus.DUE_TODAY, ReminderStatus.OVERDUE)


def notification_feed(
    snapshot: CareSnapshot,
    now: datetime,
    index: Optional[RecordIndex] = None,
) -> List[Reminder]:
    """按宠物、事项的自然顺序返回待办；未到期的不出现在这里。"""
    index = index or RecordIndex(snapshot.records)
    out = []
    for pet in snapshot.pets:
        for task_type in snapshot.cyclic_task_types():
            reminder = compute_reminder(pet, task_type, index.latest_for(pet.id, task_type.id), now)
            if reminder is not None and reminder.status in ACTIONABLE:
                out.append(reminder)
    logger.debug("notification feed: %d items", len(out))
    return out
