"""Настройка логирования"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "nos_signer"


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    package_log_level: Optional[str] = None,
) -> None:
    """
    Настраивает логирование для приложения

    Args:
        level: Уровень логирования (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Формат строки логирования (опционально)
        package_log_level: Уровень для логгеров nos_signer.* (подпись и транспорт).
            Если None — логгеры пакета наследуют level.
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_log_level is not None:
        package_logger.setLevel(getattr(logging, package_log_level.upper()))
    else:
        package_logger.setLevel(logging.NOTSET)
