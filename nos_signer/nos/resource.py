"""Идентификатор объекта в бакете"""

from dataclasses import dataclass
from urllib.parse import quote

from nos_signer.exceptions import EncodingError

# Символы, допустимые в host-части URL; все остальное (включая "/") экранируется.
# Буквы, цифры и "_.-~" quote() не трогает сам.
_HOST_SAFE = "!$&'()*+,:;=[]"


@dataclass(frozen=True)
class ResourceObject:
    """Бакет и ключ объекта"""

    bucket: str
    object_key: str

    def canonical_path(self) -> str:
        """
        Каноничный путь ресурса, который участвует в подписи

        Returns:
            Строка вида /<bucket>/<ключ в percent-encoding>, например /foo/foo%2Fbar.zip

        Raises:
            EncodingError: Если ключ нельзя закодировать в UTF-8
        """
        try:
            encoded_key = quote(self.object_key, safe=_HOST_SAFE, encoding="utf-8")
        except UnicodeEncodeError as e:
            raise EncodingError(f"Ключ объекта нельзя закодировать: {self.object_key!r}") from e
        return f"/{self.bucket}/{encoded_key}"

    def request_uri(self) -> str:
        """Ключ объекта без кодирования, дописывается к базовому URL как есть"""
        return self.object_key
