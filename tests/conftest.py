"""Общие фикстуры для тестов"""

import os
from datetime import datetime, timezone

import pytest

from nos_signer.config import Configuration

FIXED_NOW = datetime(2021, 7, 28, 8, 38, 54, tzinfo=timezone.utc)
ENDPOINT = "https://nos-eastchina1.126.net"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Изолирует тесты от переменных окружения NOS_* и файла .env"""
    for name in list(os.environ):
        if name.startswith("NOS_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def make_config(**overrides) -> Configuration:
    params = {
        "access_key": "ak",
        "access_secret": "123123",
        "endpoint": ENDPOINT,
        "default_bucket": "foo",
    }
    params.update(overrides)
    return Configuration(_env_file=None, **params)


@pytest.fixture
def config() -> Configuration:
    return make_config()


@pytest.fixture
def sub_domain_config() -> Configuration:
    return make_config(is_sub_domain=True)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW
