"""Построение URL объекта и заголовка Host"""

from urllib.parse import quote, urlsplit

from nos_signer.config import Configuration
from nos_signer.utils.urls import host_of, split_endpoint


class EndpointResolver:
    """
    Вычисляет базовый URL бакета и значение заголовка Host.

    Поддерживаются два режима адресации:

    * path-style (is_sub_domain=False): ``<endpoint или cdn_domain>/<bucket>/<key>``;
    * virtual-host (is_sub_domain=True): ``<scheme>://<bucket>.<host endpoint'а>/<key>``.

    В path-style режиме заголовок Host все равно имеет вид ``<bucket>.<host endpoint'а>``:
    сервер ожидает virtual-host Host даже для path-style запроса.
    """

    def __init__(self, config: Configuration):
        """
        Инициализация резолвера

        Args:
            config: Конфигурация клиента

        Raises:
            ConfigurationError: Если endpoint или cdn_domain не являются корректными URL
        """
        self._config = config
        self._endpoint = split_endpoint(config.endpoint, "endpoint")
        # Path-style URL строится от config.host: CDN-домен, если он задан, иначе endpoint
        self._public = split_endpoint(
            config.host, "cdn_domain" if config.cdn_domain else "endpoint"
        )

    @property
    def bucket(self) -> str:
        return self._config.default_bucket

    def resolve_base_url(self) -> str:
        """Базовый URL бакета без завершающего "/" """
        if self._config.is_sub_domain:
            return f"{self._endpoint.scheme}://{self.bucket}.{host_of(self._endpoint)}"

        base = self._public
        path = base.path.rstrip("/")
        return f"{base.scheme}://{base.netloc}{path}/{self.bucket}"

    def resolve_object_url(self, object_key: str) -> str:
        """URL объекта: базовый URL и ключ как есть, без кодирования"""
        return f"{self.resolve_base_url()}/{object_key}"

    def resolve_request_url(self, object_key: str) -> str:
        """
        URL для отправки запроса: ключ кодируется целиком, сохраняются только "/"

        Символы "?" и "#" в ключе становятся частью пути, а не query или fragment.
        """
        encoded_key = quote(object_key, safe="/", encoding="utf-8")
        return f"{self.resolve_base_url()}/{encoded_key}"

    def resolve_host_header(self, url: str) -> str:
        """
        Значение заголовка Host для запроса на url

        Args:
            url: URL, построенный resolve_object_url

        Returns:
            Хост из url в режиме поддомена, иначе <bucket>.<host endpoint'а>
        """
        if self._config.is_sub_domain:
            return host_of(urlsplit(url))
        return f"{self.bucket}.{host_of(self._endpoint)}"
