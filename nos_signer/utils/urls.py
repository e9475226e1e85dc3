"""Разбор адресов endpoint и CDN"""

from urllib.parse import SplitResult, urlsplit

from nos_signer.exceptions import ConfigurationError


def split_endpoint(value: str, field_name: str = "endpoint") -> SplitResult:
    """
    Разбирает URL endpoint'а и проверяет, что он имеет вид scheme://host[:port][/path]

    Args:
        value: Строка с URL
        field_name: Имя поля конфигурации для сообщения об ошибке

    Returns:
        Результат urlsplit

    Raises:
        ConfigurationError: Если URL некорректен
    """
    if not value or not value.strip():
        raise ConfigurationError(f"{field_name} не задан")
    try:
        parts = urlsplit(value.strip())
        # Обращение к port валидирует номер порта
        _ = parts.port
    except ValueError as e:
        raise ConfigurationError(f"{field_name} не является корректным URL: {value!r}") from e
    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise ConfigurationError(f"{field_name} не является корректным URL: {value!r}")
    if parts.query or parts.fragment:
        raise ConfigurationError(f"{field_name} не должен содержать query или fragment: {value!r}")
    return parts


def host_of(parts: SplitResult) -> str:
    """Возвращает хост с портом (если он указан явно), без учетных данных"""
    host = parts.hostname or ""
    if parts.port is not None:
        return f"{host}:{parts.port}"
    return host
