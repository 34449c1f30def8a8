"""本地日历日工具：引擎以本地日期为最小粒度。"""
from datetime import date, datetime
from typing import Union


def local_time(value: datetime) -> datetime:
    """统一成无时区的本地时间，带时区与不带时区的记录才能互相比较。"""
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def local_day(value: Union[date, datetime]) -> date:
    """取本地日历日。无时区的 datetime 视为本地时间，有时区的先转成本地。"""
    if isinstance(value, datetime):
        return local_time(value).date()
    return value
