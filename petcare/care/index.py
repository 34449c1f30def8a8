"""记录索引：按宠物、事项分组，并给出统一的新旧顺序。"""
import logging
from collections import defaultdict
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Tuple, Union

from petcare.care.dates import local_day, local_time
from petcare.care.models import Record

logger = logging.getLogger(__name__)


def recency_key(record: Record) -> Tuple[datetime, str]:
    """按本地时间排序，时间相同按 ID 排，保证结果稳定。"""
    return (local_time(record.date), record.id)


class RecordIndex:
    """对一份记录快照建立只读索引，不修改输入。"""

    def __init__(self, records: Iterable[Record]):
        self._by_pair: Dict[Tuple[str, str], List[Record]] = defaultdict(list)
        self._by_pet: Dict[str, List[Record]] = defaultdict(list)
        self._by_day: Dict[date, List[Record]] = defaultdict(list)
        for record in records:
            self._by_pair[(record.pet_id, record.task_type_id)].append(record)
            self._by_pet[record.pet_id].append(record)
            self._by_day[local_day(record.date)].append(record)
        # 统一为新的在前
        for bucket in (self._by_pair, self._by_pet, self._by_day):
            for items in bucket.values():
                items.sort(key=recency_key, reverse=True)
        logger.debug("indexed %d pets, %d days", len(self._by_pet), len(self._by_day))

    def latest_for(self, pet_id: str, task_type_id: str) -> Optional[Record]:
        """某宠物某事项最近的一条记录。"""
        items = self._by_pair.get((pet_id, task_type_id))
        return items[0] if items else None

    def all_on(
        self,
        day: Union[date, datetime],
        pet_id: Optional[str] = None,
        task_type_id: Optional[str] = None,
    ) -> List[Record]:
        """某个本地日历日的所有记录，可按宠物、事项过滤。"""
        return [
            r for r in self._by_day.get(local_day(day), [])
            if (pet_id is None or r.pet_id == pet_id)
            and (task_type_id is None or r.task_type_id == task_type_id)
        ]

    def for_pet(self, pet_id: str, task_type_id: Optional[str] = None) -> List[Record]:
        """某宠物的记录，新的在前。"""
        if task_type_id is not None:
            return list(self._by_pair.get((pet_id, task_type_id), []))
        return list(self._by_pet.get(pet_id, []))
