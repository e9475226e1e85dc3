"""Форматирование и разбор дат в формате, который требует NOS.

Формат: ``Wed, 28 Jul 2021 08:38:54 GMT`` (день месяца без ведущего нуля).
Названия дней недели и месяцев зафиксированы на английском и не зависят
от локали хоста, иначе подписи не воспроизводятся на разных машинах.
"""

import re
from datetime import datetime, timezone
from typing import Optional

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

_DATE_RE = re.compile(
    r"^(?P<weekday>[A-Za-z]{3}), (?P<day>\d{1,2}) (?P<month>[A-Za-z]{3}) (?P<year>\d{4}) "
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})$"
)

GMT_SUFFIX = " GMT"


def _to_utc(instant: datetime) -> datetime:
    # Если timezone не указан, считаем что это UTC
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def format_date(instant: Optional[datetime] = None) -> str:
    """
    Форматирует момент времени для заголовка date

    Args:
        instant: Момент времени (по умолчанию - текущий)

    Returns:
        Строка вида "Wed, 28 Jul 2021 08:38:54 GMT", всегда в UTC и с точностью до секунды
    """
    moment = _to_utc(instant if instant is not None else datetime.now(timezone.utc))
    return (
        f"{_WEEKDAYS[moment.weekday()]}, {moment.day} {_MONTHS[moment.month - 1]} "
        f"{moment.year:04d} {moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
        f"{GMT_SUFFIX}"
    )


def parse_date(text: str) -> Optional[datetime]:
    """
    Разбирает дату, отформатированную format_date

    Суффикс " GMT" необязателен и считается декоративным: время всегда трактуется как UTC.

    Args:
        text: Строка с датой

    Returns:
        datetime в UTC или None, если строка не соответствует формату
    """
    if not isinstance(text, str):
        return None
    body = text.strip()
    if body.endswith(GMT_SUFFIX):
        body = body[: -len(GMT_SUFFIX)]

    match = _DATE_RE.match(body)
    if match is None:
        return None
    if match["weekday"].title() not in _WEEKDAYS:
        return None
    month_name = match["month"].title()
    if month_name not in _MONTHS:
        return None

    try:
        return datetime(
            int(match["year"]),
            _MONTHS.index(month_name) + 1,
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            tzinfo=timezone.utc,
        )
    except ValueError:
        return None
