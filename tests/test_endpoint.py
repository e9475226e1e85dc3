"""Тесты построения URL и заголовка Host"""

from urllib.parse import urlsplit

import pytest
from pydantic import ValidationError

from nos_signer.config import Configuration
from nos_signer.exceptions import ConfigurationError
from nos_signer.nos.endpoint import EndpointResolver
from tests.conftest import make_config


class TestPathStyle:
    def test_base_url_contains_bucket(self, config):
        resolver = EndpointResolver(config)
        assert resolver.resolve_base_url() == "https://nos-eastchina1.126.net/foo"

    def test_object_url(self, config):
        resolver = EndpointResolver(config)
        assert resolver.resolve_object_url("text.txt") == "https://nos-eastchina1.126.net/foo/text.txt"

    def test_trailing_slash_in_endpoint(self):
        resolver = EndpointResolver(make_config(endpoint="https://nos.example.com/"))
        assert resolver.resolve_object_url("a.txt") == "https://nos.example.com/foo/a.txt"

    def test_key_is_appended_raw(self, config):
        url = EndpointResolver(config).resolve_object_url("dir/a b.txt")
        assert url == "https://nos-eastchina1.126.net/foo/dir/a b.txt"

    def test_leading_slash_is_kept(self, config):
        url = EndpointResolver(config).resolve_object_url("/lead.txt")
        assert url == "https://nos-eastchina1.126.net/foo//lead.txt"

    def test_request_url_encodes_key(self, config):
        resolver = EndpointResolver(config)
        assert resolver.resolve_request_url("a?b#c d.txt") == (
            "https://nos-eastchina1.126.net/foo/a%3Fb%23c%20d.txt"
        )
        assert resolver.resolve_request_url("dir/a.txt") == (
            "https://nos-eastchina1.126.net/foo/dir/a.txt"
        )

    def test_host_header_is_virtual_host(self, config):
        resolver = EndpointResolver(config)
        url = resolver.resolve_object_url("hello.text")
        assert urlsplit(url).hostname == "nos-eastchina1.126.net"
        assert resolver.resolve_host_header(url) == "foo.nos-eastchina1.126.net"

    def test_cdn_domain_replaces_endpoint_in_url(self):
        resolver = EndpointResolver(make_config(cdn_domain="https://cdn.example.com"))
        url = resolver.resolve_object_url("hello.text")
        assert url == "https://cdn.example.com/foo/hello.text"
        assert resolver.resolve_host_header(url) == "foo.nos-eastchina1.126.net"

    def test_base_url_follows_config_host(self):
        for config in (make_config(), make_config(cdn_domain="https://cdn.example.com/static/")):
            base = EndpointResolver(config).resolve_base_url()
            assert base == config.host.rstrip("/") + "/foo"

    def test_port_is_kept(self):
        resolver = EndpointResolver(make_config(endpoint="http://localhost:9000"))
        url = resolver.resolve_object_url("a.txt")
        assert url == "http://localhost:9000/foo/a.txt"
        assert resolver.resolve_host_header(url) == "foo.localhost:9000"


class TestSubDomain:
    def test_base_url_has_bucket_subdomain(self, sub_domain_config):
        resolver = EndpointResolver(sub_domain_config)
        assert resolver.resolve_base_url() == "https://foo.nos-eastchina1.126.net"

    def test_host_header_equals_url_host(self, sub_domain_config):
        resolver = EndpointResolver(sub_domain_config)
        url = resolver.resolve_object_url("hello.text")
        assert url == "https://foo.nos-eastchina1.126.net/hello.text"
        assert resolver.resolve_host_header(url) == urlsplit(url).hostname

    def test_port_is_kept(self):
        resolver = EndpointResolver(make_config(endpoint="http://localhost:9000", is_sub_domain=True))
        url = resolver.resolve_object_url("a.txt")
        assert url == "http://foo.localhost:9000/a.txt"
        assert resolver.resolve_host_header(url) == "foo.localhost:9000"


class TestInvalidEndpoint:
    @pytest.mark.parametrize(
        "endpoint",
        ["", "nos-eastchina1.126.net", "ftp://nos.example.com", "https://", "http://host:notaport"],
    )
    def test_resolver_rejects_malformed_endpoint(self, endpoint):
        config = Configuration.model_construct(
            access_key="ak",
            access_secret="sk",
            endpoint=endpoint,
            default_bucket="foo",
            cdn_domain=None,
            is_sub_domain=False,
        )
        with pytest.raises(ConfigurationError):
            EndpointResolver(config)

    def test_resolver_rejects_malformed_cdn_domain(self):
        config = Configuration.model_construct(
            access_key="ak",
            access_secret="sk",
            endpoint="https://nos.example.com",
            default_bucket="foo",
            cdn_domain="cdn.example.com",
            is_sub_domain=False,
        )
        with pytest.raises(ConfigurationError):
            EndpointResolver(config)

    def test_configuration_rejects_malformed_endpoint(self):
        with pytest.raises(ValidationError):
            make_config(endpoint="not a url")
