"""Клиент для работы с NOS"""

import logging
import ssl
import urllib.request
from pathlib import Path
from typing import Optional

from nos_signer.config import Configuration
from nos_signer.models.types import SignedRequest, UploadResult
from nos_signer.nos.authorizer import Operation, RequestAuthorizer
from nos_signer.nos.signature import content_hash

logger = logging.getLogger(__name__)


class NOSClient:
    """Клиент для загрузки и удаления объектов в бакете NOS"""

    def __init__(
        self,
        config: Configuration,
        authorizer: Optional[RequestAuthorizer] = None,
        timeout: float = 30.0,
    ):
        """
        Инициализация клиента NOS

        Args:
            config: Конфигурация клиента
            authorizer: Подписывающий компонент (по умолчанию создается из config)
            timeout: Таймаут HTTP запроса в секундах
        """
        self._config = config
        self._authorizer = authorizer or RequestAuthorizer(config)
        self._timeout = timeout

    def _ssl_context(self) -> ssl.SSLContext:
        ssl_ctx = ssl.create_default_context()
        if not self._config.verify_ssl:
            ssl_ctx.check_hostname = False
            ssl_ctx.verify_mode = ssl.CERT_NONE
        return ssl_ctx

    def _send(
        self, signed: SignedRequest, object_key: str, body: Optional[bytes] = None
    ) -> tuple[int, str]:
        """
        Отправляет подписанный запрос

        Подписывается каноничный путь, а путь запроса кодируется здесь, при отправке.

        Returns:
            (HTTP статус, ETag из ответа или пустая строка)
        """
        req = urllib.request.Request(
            self._authorizer.resolver.resolve_request_url(object_key),
            data=body,
            method=signed["method"],
            headers=signed["headers"],
        )
        with urllib.request.urlopen(req, timeout=self._timeout, context=self._ssl_context()) as resp:
            if resp.status not in (200, 204):
                raise OSError(f"{signed['method']} {signed['url']}: HTTP {resp.status}")
            etag = resp.headers.get("ETag", "") or ""
            return resp.status, etag.strip('"')

    def upload_data(
        self,
        data: bytes,
        object_key: str,
        content_type: Optional[str] = None,
        with_md5: bool = False,
    ) -> UploadResult:
        """
        Загружает данные в бакет по умолчанию

        Args:
            data: Содержимое объекта
            object_key: Ключ объекта
            content_type: MIME-тип (опционально)
            with_md5: Добавить и подписать заголовок content-md5

        Returns:
            Информация о загруженном объекте
        """
        signed = self._authorizer.authorize(
            Operation.PUT,
            object_key,
            content_length=len(data),
            content_md5=content_hash(data) if with_md5 else None,
            content_type=content_type,
        )
        try:
            status, etag = self._send(signed, object_key, body=data)
        except Exception as e:
            logger.error(f"Ошибка загрузки {object_key}: {e}", exc_info=True)
            raise

        logger.info(
            f"Объект загружен: nos://{self._config.default_bucket}/{object_key} ({len(data)} байт)"
        )
        return {"key": object_key, "url": signed["url"], "status": status, "etag": etag}

    def upload_file(
        self,
        local_path: str,
        object_key: str | None = None,
        content_type: Optional[str] = None,
        with_md5: bool = False,
    ) -> UploadResult:
        """
        Загружает файл в бакет по умолчанию

        Args:
            local_path: Путь к локальному файлу
            object_key: Ключ объекта (если не указан — используется имя файла)
            content_type: MIME-тип (опционально)
            with_md5: Добавить и подписать заголовок content-md5

        Returns:
            Информация о загруженном объекте
        """
        path = Path(local_path)
        if not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {local_path}")
        key = object_key if object_key is not None else path.name

        return self.upload_data(
            path.read_bytes(), key, content_type=content_type, with_md5=with_md5
        )

    def delete(self, object_key: str) -> int:
        """
        Удаляет объект из бакета по умолчанию

        Returns:
            HTTP статус ответа
        """
        signed = self._authorizer.authorize(Operation.DELETE, object_key)
        try:
            status, _ = self._send(signed, object_key)
        except Exception as e:
            logger.error(f"Ошибка удаления {object_key}: {e}", exc_info=True)
            raise

        logger.info(f"Объект удален: nos://{self._config.default_bucket}/{object_key}")
        return status

    def resource_url(self, object_key: str) -> str:
        """Публичный URL объекта (через CDN-домен, если он задан)"""
        return self._authorizer.resolver.resolve_object_url(object_key)
