"""Подпись запросов NOS (HMAC-SHA256 над каноничной строкой).

Строка для подписи всегда состоит из пяти полей, разделенных переводом строки:

    METHOD
    content-md5
    content-type
    date
    /bucket/percent-encoded-key

Любое изменение состава или порядка полей ломает совместимость с сервером.
"""

import base64
import hashlib
import hmac
from typing import Mapping

from nos_signer.exceptions import EncodingError
from nos_signer.nos.dates import format_date
from nos_signer.nos.headers import HeaderValue, normalize_headers
from nos_signer.nos.resource import ResourceObject


def _utf8(value: str, what: str) -> bytes:
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(f"{what} нельзя представить в UTF-8") from e


def string_to_sign(
    method: str,
    headers: Mapping[str, HeaderValue],
    resource: ResourceObject,
) -> str:
    """
    Строит каноничную строку для подписи

    Args:
        method: HTTP метод (регистр не важен)
        headers: Заголовки запроса; date может быть строкой или datetime
        resource: Подписываемый объект

    Returns:
        Пять полей, объединенных через "\\n"
    """
    normalized = normalize_headers(headers)
    date = normalized.get("date")
    if date is None:
        date = format_date()

    parts = [
        method.upper(),
        normalized.get("content-md5", ""),
        normalized.get("content-type", ""),
        date,
        resource.canonical_path().strip(),
    ]
    return "\n".join(parts)


def sign(secret_key: str, data: str) -> str:
    """
    Вычисляет HMAC-SHA256 и кодирует его в base64

    Args:
        secret_key: Секретный ключ (Access Secret)
        data: Строка для подписи

    Returns:
        Подпись в base64
    """
    digest = hmac.new(
        _utf8(secret_key, "Секретный ключ"),
        _utf8(data, "Строку для подписи"),
        hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def content_hash(data: bytes | str) -> str:
    """MD5 содержимого в нижнем hex-регистре (значение для заголовка content-md5)"""
    if isinstance(data, str):
        data = _utf8(data, "Содержимое")
    return hashlib.md5(data).hexdigest()


def compute_signature(
    secret_key: str,
    method: str,
    headers: Mapping[str, HeaderValue],
    resource: ResourceObject,
) -> str:
    """Подпись запроса: sign(secret_key, string_to_sign(...))"""
    return sign(secret_key, string_to_sign(method, headers, resource))
