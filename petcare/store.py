"""宠物、事项、记录的内存存储；每次查询前取一份只读快照交给引擎。"""
import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from petcare.care.models import CareSnapshot, Pet, Record, TaskType
from petcare.config import DEFAULT_TASK_TYPES, WEIGHT_TASK_ID

logger = logging.getLogger(__name__)

_UNSET = object()


def default_task_types() -> List[TaskType]:
    return [TaskType.model_validate(item) for item in DEFAULT_TASK_TYPES]


class CareStore:
    """按 ID 保存实体，修改即整体替换，保持插入顺序。"""

    def __init__(self, task_types: Optional[Iterable[TaskType]] = None):
        self._pets: Dict[str, Pet] = {}
        self._records: Dict[str, Record] = {}
        types = default_task_types() if task_types is None else task_types
        self._task_types: Dict[str, TaskType] = {t.id: t for t in types}

    def snapshot(self) -> CareSnapshot:
        return CareSnapshot(
            pets=tuple(self._pets.values()),
            task_types=tuple(self._task_types.values()),
            records=tuple(self._records.values()),
        )

    # 宠物

    def get_pet(self, pet_id: str) -> Optional[Pet]:
        return self._pets.get(pet_id)

    def add_pet(self, pet: Pet, recorded_at: Optional[datetime] = None) -> Optional[Record]:
        """新建宠物并写入初始体重记录。ID 已存在返回 None。"""
        if pet.id in self._pets:
            logger.warning("pet %s already exists", pet.id)
            return None
        self._pets[pet.id] = pet
        record = Record(
            id=f"init-weight-{pet.id}",
            pet_id=pet.id,
            task_type_id=WEIGHT_TASK_ID,
            date=recorded_at or datetime.now(),
            value=pet.initial_weight,
            note="初始体重",
        )
        self._records[record.id] = record
        logger.info("added pet %s", pet.id)
        return record

    def update_pet(self, pet: Pet) -> Optional[Pet]:
        if pet.id not in self._pets:
            return None
        self._pets[pet.id] = pet
        return pet

    def delete_pet(self, pet_id: str) -> bool:
        """删除宠物及其全部记录。"""
        if self._pets.pop(pet_id, None) is None:
            return False
        orphans = [rid for rid, r in self._records.items() if r.pet_id == pet_id]
        for rid in orphans:
            del self._records[rid]
        logger.info("deleted pet %s with %d records", pet_id, len(orphans))
        return True

    def list_pets(self) -> List[Pet]:
        return list(self._pets.values())

    # 记录

    def get_record(self, record_id: str) -> Optional[Record]:
        return self._records.get(record_id)

    def add_record(self, record: Record) -> Optional[Record]:
        if record.id in self._records:
            logger.warning("record %s already exists", record.id)
            return None
        self._records[record.id] = record
        return record

    def update_record(self, record_id: str, date=_UNSET, value=_UNSET, note=_UNSET) -> Optional[Record]:
        """只能修改时间、数值与备注。"""
        current = self._records.get(record_id)
        if current is None:
            return None
        changes = {}
        if date is not _UNSET:
            changes["date"] = date
        if value is not _UNSET:
            changes["value"] = value
        if note is not _UNSET:
            changes["note"] = note
        # 重新校验，拒绝非法时间
        updated = Record.model_validate({**current.model_dump(), **changes})
        self._records[record_id] = updated
        return updated

    def delete_record(self, record_id: str) -> bool:
        return self._records.pop(record_id, None) is not None

    def list_records(self, pet_id: Optional[str] = None) -> List[Record]:
        return [r for r in self._records.values() if pet_id is None or r.pet_id == pet_id]

    # 事项

    def get_task_type(self, task_type_id: str) -> Optional[TaskType]:
        return self._task_types.get(task_type_id)

    def add_task_type(self, task_type: TaskType) -> Optional[TaskType]:
        if task_type.id in self._task_types:
            logger.warning("task type %s already exists", task_type.id)
            return None
        self._task_types[task_type.id] = task_type
        return task_type

    def update_task_type(self, task_type: TaskType) -> Optional[TaskType]:
        if task_type.id not in self._task_types:
            return None
        self._task_types[task_type.id] = task_type
        return task_type

    def delete_task_type(self, task_type_id: str) -> bool:
        """删除事项；其历史记录保留，引擎会忽略这些孤立记录。"""
        return self._task_types.pop(task_type_id, None) is not None

    def list_task_types(self) -> List[TaskType]:
        return list(self._task_types.values())
