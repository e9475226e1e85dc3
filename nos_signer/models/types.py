"""Типы данных для проекта"""

from typing import Dict, TypedDict


class SignedRequest(TypedDict):
    """Подписанный запрос, готовый к отправке транспортом"""

    method: str
    url: str
    headers: Dict[str, str]


class UploadResult(TypedDict):
    """Результат загрузки объекта в NOS"""

    key: str
    url: str
    status: int
    etag: str
