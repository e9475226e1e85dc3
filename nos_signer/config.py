"""Конфигурация клиента NOS"""

from pydantic import Field, field_validator  # type: ignore[import-untyped]
from pydantic_settings import (  # type: ignore[import-untyped]
    BaseSettings,
    SettingsConfigDict,
)

from nos_signer.utils.urls import split_endpoint


class Configuration(BaseSettings):
    """
    Конфигурация клиента NOS.

    Создается один раз при старте и передается в RequestAuthorizer / NOSClient.
    Объект неизменяемый, поэтому его можно читать из нескольких потоков без блокировок.
    """

    model_config = SettingsConfigDict(
        env_prefix="NOS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Учетные данные NOS
    access_key: str = Field(..., description="Access Key для NOS")
    access_secret: str = Field(..., description="Access Secret для NOS")

    # Адресация бакета
    endpoint: str = Field(
        default="https://nos-eastchina1.126.net",
        description="URL endpoint для NOS",
    )
    default_bucket: str = Field(..., min_length=1, description="Имя бакета по умолчанию")
    cdn_domain: str | None = Field(
        default=None,
        description="URL CDN-домена (используется вместо endpoint в path-style адресации)",
    )
    is_sub_domain: bool = Field(
        default=False,
        description="Адресовать бакет через поддомен (virtual-host style)",
    )

    # Транспорт
    verify_ssl: bool = Field(
        default=True,
        description="Проверять TLS-сертификат сервера",
    )

    # Настройки логирования
    log_level: str = Field(
        default="INFO",
        description="Уровень логирования (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    signer_log_level: str | None = Field(
        default=None,
        description="Уровень для логгеров nos_signer.* (подпись и транспорт). Пусто — как log_level.",
    )

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Проверяет, что endpoint является корректным URL"""
        split_endpoint(v, "endpoint")
        return v.strip()

    @field_validator("cdn_domain")
    @classmethod
    def validate_cdn_domain(cls, v: str | None) -> str | None:
        """Проверяет CDN-домен; пустая строка считается отсутствием CDN"""
        if v is None or not v.strip():
            return None
        split_endpoint(v, "cdn_domain")
        return v.strip()

    @field_validator("log_level", "signer_log_level")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str | None:
        """Валидирует уровень логирования"""
        if v is None:
            return None
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level должен быть одним из: {valid_levels}")
        return v_upper

    @property
    def host(self) -> str:
        """Адрес, от которого строятся публичные ссылки: CDN-домен или endpoint"""
        return self.cdn_domain or self.endpoint
