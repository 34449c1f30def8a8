"""宠物、护理事项、记录与提醒数据模型。"""
from datetime import date, datetime
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class PetType(str, Enum):
    """宠物种类。"""
    CAT = "猫"
    DOG = "狗"
    OTHER = "其他"


class Gender(str, Enum):
    """性别。"""
    MALE = "公"
    FEMALE = "母"
    UNKNOWN = "未知"


class ReminderStatus(str, Enum):
    """提醒状态。"""
    UPCOMING = "upcoming"    # 未到期
    DUE_TODAY = "due-today"  # 今日到期
    OVERDUE = "overdue"      # 已逾期


class ValueSpec(BaseModel):
    """事项需要录入的数值（如体重）；无此配置即不录数值。"""
    label: Optional[str] = Field(None, description="数值名称，如「体重 (kg)」")

    model_config = ConfigDict(frozen=True)


class TaskType(BaseModel):
    """护理事项定义。"""
    id: str = Field(..., description="事项 ID")
    name: str = Field(..., description="事项名称")
    color: str = Field("#f97316", description="颜色")
    icon: str = Field("", description="图标 class")
    cycle_days: Optional[int] = Field(None, gt=0, description="提醒周期（天）；None 表示不提醒")
    value_spec: Optional[ValueSpec] = Field(None, description="数值录入配置")
    is_default: bool = Field(False, description="是否内置事项")

    model_config = ConfigDict(frozen=True)

    @property
    def is_cyclic(self) -> bool:
        return self.cycle_days is not None and self.cycle_days > 0

    @property
    def has_value(self) -> bool:
        return self.value_spec is not None

    @property
    def value_name(self) -> Optional[str]:
        return self.value_spec.label if self.value_spec else None


class Pet(BaseModel):
    """宠物档案。"""
    id: str = Field(..., description="宠物 ID")
    name: str = Field(..., description="名字")
    type: PetType = Field(PetType.CAT, description="种类")
    gender: Gender = Field(Gender.UNKNOWN, description="性别")
    breed: str = Field("", description="品种")
    birthday: date = Field(..., description="生日")
    initial_weight: float = Field(0.0, ge=0, description="建档体重 kg")
    theme_color: str = Field("#FCA5A5", description="主题色")
    avatar: Optional[str] = Field(None, description="头像地址")

    model_config = ConfigDict(use_enum_values=True, frozen=True)


class Record(BaseModel):
    """一条护理记录；创建后 pet_id / task_type_id 不可修改。"""
    id: str = Field(..., description="记录 ID")
    pet_id: str = Field(..., description="宠物 ID")
    task_type_id: str = Field(..., description="事项 ID")
    date: datetime = Field(..., description="记录时间")
    value: Optional[float] = Field(None, description="数值，如体重")
    note: Optional[str] = Field(None, description="备注")

    model_config = ConfigDict(frozen=True)


class Reminder(BaseModel):
    """某宠物某事项的下次到期情况，每次查询时重新计算，不落盘。"""
    pet: Pet
    task_type: TaskType
    last_record: Optional[Record] = None
    next_due_date: date
    days_offset: int = Field(..., description="距到期天数，负数为逾期天数")
    status: ReminderStatus

    model_config = ConfigDict(use_enum_values=True, frozen=True)

    @property
    def overdue_days(self) -> int:
        return max(0, -self.days_offset)

    @property
    def label(self) -> str:
        if self.status == ReminderStatus.OVERDUE:
            return f"逾期 {self.overdue_days} 天"
        if self.status == ReminderStatus.DUE_TODAY:
            return "今日到期"
        return f"{self.days_offset} 天后"


class CareSnapshot(BaseModel):
    """某一时刻的宠物、事项、记录只读快照。"""
    pets: Tuple[Pet, ...] = ()
    task_types: Tuple[TaskType, ...] = ()
    records: Tuple[Record, ...] = ()

    model_config = ConfigDict(frozen=True)

    def pet(self, pet_id: str) -> Optional[Pet]:
        return next((p for p in self.pets if p.id == pet_id), None)

    def task_type(self, task_type_id: str) -> Optional[TaskType]:
        return next((t for t in self.task_types if t.id == task_type_id), None)

    def cyclic_task_types(self) -> Tuple[TaskType, ...]:
        return tuple(t for t in self.task_types if t.is_cyclic)
