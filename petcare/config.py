"""全局配置：内置事项、颜色与展示数量。"""
import calendar
import logging
import os

# 内置「体重」事项 ID（宠物创建时自动写入初始体重记录）
WEIGHT_TASK_ID = "1"

# 内置事项：cycle_days 为 None 表示不提醒
DEFAULT_TASK_TYPES = [
    {"id": "1", "name": "体重", "color": "#f97316", "icon": "fa-solid fa-weight-scale",
     "cycle_days": None, "is_default": True, "value_spec": {"label": "体重 (kg)"}},
    {"id": "2", "name": "看医生", "color": "#ef4444", "icon": "fa-solid fa-stethoscope",
     "cycle_days": 180, "is_default": True},
    {"id": "3", "name": "驱虫", "color": "#10b981", "icon": "fa-solid fa-shield-virus",
     "cycle_days": 30, "is_default": True},
    {"id": "4", "name": "洗澡", "color": "#8b5cf6", "icon": "fa-solid fa-bath",
     "cycle_days": 30, "is_default": True},
    {"id": "5", "name": "剪指甲", "color": "#ec4899", "icon": "fa-solid fa-hand-scissors",
     "cycle_days": 21, "is_default": True},
]

# 宠物主题色
THEME_COLORS = [
    "#FCA5A5", "#FDBA74", "#FCD34D", "#BEF264", "#6EE7B7",
    "#67E8F9", "#93C5FD", "#A5B4FC", "#C4B5FD", "#F9A8D4",
]

# 提醒展示数量
PET_DETAIL_REMINDER_LIMIT = 5  # 宠物详情页，「展开」后不截断
PET_CARD_REMINDER_LIMIT = 3    # 首页宠物卡片

# 日历：周日为第一列
WEEK_FIRST_DAY = calendar.SUNDAY

# 日志
LOG_LEVEL = os.environ.get("PETCARE_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging() -> None:
    """供宿主程序调用；引擎本身不设置 handler。"""
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
