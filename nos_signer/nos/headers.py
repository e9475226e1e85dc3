"""Нормализация заголовков перед подписью"""

from datetime import datetime
from typing import Mapping, Union

from nos_signer.nos.dates import format_date

HeaderValue = Union[str, int, datetime]


def normalize_value(value: HeaderValue) -> str:
    """
    Приводит значение заголовка к строке

    Raises:
        TypeError: Для типов, отличных от str, int и datetime
    """
    if isinstance(value, str):
        return value
    if isinstance(value, datetime):
        return format_date(value)
    # bool - подкласс int, но как значение заголовка не имеет смысла
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise TypeError(f"Неподдерживаемый тип значения заголовка: {type(value).__name__}")


def normalize_headers(headers: Mapping[str, HeaderValue]) -> dict[str, str]:
    """
    Переводит имена заголовков в нижний регистр и приводит значения к строкам

    Ключи, совпадающие после приведения регистра, не объединяются:
    побеждает последний. Заголовок date не добавляется, если его нет.

    Args:
        headers: Заголовки с произвольным регистром имен

    Returns:
        Новый словарь заголовков
    """
    return {name.lower(): normalize_value(value) for name, value in headers.items()}
