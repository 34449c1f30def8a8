"""配置测试。"""
import logging

from petcare.config import DEFAULT_TASK_TYPES, PET_CARD_REMINDER_LIMIT, PET_DETAIL_REMINDER_LIMIT, configure_logging
from petcare.store import default_task_types


def test_default_task_types_are_valid() -> None:
    types = default_task_types()
    assert len(types) == len(DEFAULT_TASK_TYPES) == 5
    assert [t.id for t in types if t.is_cyclic] == ["2", "3", "4", "5"]
    assert PET_CARD_REMINDER_LIMIT < PET_DETAIL_REMINDER_LIMIT


def test_configure_logging() -> None:
    configure_logging()
    assert logging.getLogger("petcare").getEffectiveLevel() <= logging.CRITICAL
