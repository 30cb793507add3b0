"""
Productivity data for the stars-and-productivity composition.
"""

from dataclasses import dataclass
from typing import List, Sequence

WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

HOURS = tuple(str(hour) for hour in range(24))


@dataclass(frozen=True)
class ProductivityDataPoint:
    time: int  # hour of day, 0-23
    productivity: float  # activity level, 0-100+


MOCK_PRODUCTIVITY_DATA: List[ProductivityDataPoint] = [
    ProductivityDataPoint(hour, value)
    for hour, value in enumerate([
        0, 0, 0, 0, 0,        # sleeping
        5, 15, 25, 45,        # waking up
        65, 70, 60,           # morning peak
        50,                   # lunch
        55, 45, 35,           # afternoon
        25, 15, 10,           # winding down
        5, 0, 0, 0, 0,        # evening
    ])
]


def most_productive_hour(data: Sequence[ProductivityDataPoint]) -> int:
    """Hour with the highest productivity; the earliest one wins ties, 0 for no data."""
    max_hour = 0
    max_productivity = 0
    for point in data:
        if point.productivity > max_productivity:
            max_productivity = point.productivity
            max_hour = point.time
    return max_hour


def format_hour(hour) -> str:
    """24h hour -> "12 am", "2 pm", ..."""
    hour = int(hour)
    if hour == 0:
        return "12 am"
    if hour == 12:
        return "12 pm"
    if hour > 12:
        return f"{hour - 12} pm"
    return f"{hour} am"


def weekday_name(index: int) -> str:
    if 0 <= index < len(WEEKDAYS):
        return WEEKDAYS[index]
    return WEEKDAYS[0]
