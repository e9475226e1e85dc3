"""Сборка подписанных заголовков для запросов PUT/DELETE"""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Dict, Optional

from nos_signer.config import Configuration
from nos_signer.exceptions import ConfigurationError
from nos_signer.models.types import SignedRequest
from nos_signer.nos.dates import format_date
from nos_signer.nos.endpoint import EndpointResolver
from nos_signer.nos.resource import ResourceObject
from nos_signer.nos.signature import compute_signature

logger = logging.getLogger(__name__)

AUTH_SCHEME = "NOS"


class Operation(str, Enum):
    """Поддерживаемые операции над объектом"""

    PUT = "PUT"
    DELETE = "DELETE"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RequestAuthorizer:
    """Формирует URL и полный набор заголовков для запроса к NOS"""

    def __init__(
        self,
        config: Optional[Configuration],
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Инициализация

        Args:
            config: Конфигурация клиента (обязательна)
            clock: Источник текущего времени (по умолчанию - системные часы в UTC)

        Raises:
            ConfigurationError: Если конфигурация не передана или endpoint некорректен
        """
        if config is None:
            raise ConfigurationError("Конфигурация NOS не инициализирована")
        self._config = config
        self._clock = clock or _utc_now
        self._resolver = EndpointResolver(config)

    @property
    def resolver(self) -> EndpointResolver:
        return self._resolver

    def authorize(
        self,
        operation: Operation | str,
        object_key: str,
        content_length: Optional[int] = None,
        content_md5: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> SignedRequest:
        """
        Подписывает запрос к объекту в бакете по умолчанию

        Args:
            operation: PUT или DELETE
            object_key: Ключ объекта
            content_length: Размер тела (учитывается только для PUT)
            content_md5: MD5 тела в hex, если нужна проверка целостности
            content_type: MIME-тип тела

        Returns:
            Метод, URL и заголовки, готовые к отправке
        """
        if not isinstance(operation, Operation):
            operation = Operation(operation.upper())
        resource = ResourceObject(bucket=self._config.default_bucket, object_key=object_key)

        headers: Dict[str, str] = {"date": format_date(self._clock())}
        if operation is Operation.PUT and content_length is not None:
            headers["content-length"] = str(content_length)
        if content_md5:
            headers["content-md5"] = content_md5
        if content_type:
            headers["content-type"] = content_type

        signature = compute_signature(
            self._config.access_secret, operation.value, headers, resource
        )
        headers["authorization"] = f"{AUTH_SCHEME} {self._config.access_key}:{signature}"

        url = self._resolver.resolve_object_url(resource.request_uri())
        headers["host"] = self._resolver.resolve_host_header(url)

        logger.debug(f"Подписан запрос {operation.value} {resource.canonical_path()}")
        return {"method": operation.value, "url": url, "headers": headers}
