"""
C10 decimalized date and time.

A day is split into 100 intervals of 100 centivals of 100 ticks, and a year
into decadays of ten days. See https://hackaday.io/project/11131-c10
"""

from .domain.calendar import CalendarFields, decompose_calendar
from .domain.duration import CENTIVAL, DAY, DECADAY, INTERVAL, TICK, Duration, decompose, make_duration
from .domain.system_time import SystemTime

__version__ = "0.1.0"

__all__ = [
    "CENTIVAL",
    "DAY",
    "DECADAY",
    "INTERVAL",
    "TICK",
    "CalendarFields",
    "Duration",
    "SystemTime",
    "decompose",
    "decompose_calendar",
    "make_duration",
]
