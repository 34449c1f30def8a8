"""萌宠日记：宠物周期护理提醒与日历聚合。"""
__version__ = "0.1.0"
