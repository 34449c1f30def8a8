"""宠物时间线、体重曲线与年龄。"""
from datetime import date, datetime
from typing import List, Optional, Tuple

from petcare.care.index import RecordIndex
from petcare.care.models import Pet, Record
from petcare.config import WEIGHT_TASK_ID


def pet_timeline(index: RecordIndex, pet_id: str, task_type_id: Optional[str] = None) -> List[Record]:
    """成长全记录，新的在前。"""
    return index.for_pet(pet_id, task_type_id)


def weight_series(index: RecordIndex, pet_id: str) -> List[Tuple[datetime, float]]:
    """体重曲线数据点，旧的在前；没填数值的记录跳过。"""
    points = [(r.date, r.value) for r in index.for_pet(pet_id, WEIGHT_TASK_ID) if r.value is not None]
    points.reverse()
    return points


def latest_weight(index: RecordIndex, pet: Pet) -> float:
    """最近一次体重，没有记录时用建档体重。"""
    record = index.latest_for(pet.id, WEIGHT_TASK_ID)
    if record is None or record.value is None:
        return pet.initial_weight
    return record.value


def pet_age(birthday: date, today: date) -> Tuple[int, int]:
    """(岁, 月)，只按年月计算。"""
    years = today.year - birthday.year
    months = today.month - birthday.month
    if months < 0:
        years -= 1
        months += 12
    return years, months


def age_label(birthday: Optional[date], today: date) -> str:
    if birthday is None:
        return "未知"
    years, months = pet_age(birthday, today)
    return f"{years}岁{months}个月" if years > 0 else f"{months}个月"
