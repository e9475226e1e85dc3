"""Исключения, используемые в проекте"""


class NOSError(RuntimeError):
    """Базовое исключение для ошибок подписи и отправки запросов в NOS"""


class ConfigurationError(NOSError, ValueError):
    """Конфигурация отсутствует или некорректна (например, невалидный endpoint)"""


class EncodingError(NOSError):
    """Ключ объекта или учетные данные нельзя представить в UTF-8"""
