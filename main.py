"""Скрипт для загрузки и удаления объектов в бакете NOS"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError  # type: ignore[import-untyped]

from nos_signer.config import Configuration
from nos_signer.exceptions import NOSError
from nos_signer.nos.client import NOSClient
from nos_signer.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Загрузка и удаление объектов в бакете NOS")
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Минимальный вывод (только результат или ошибка)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    upload = commands.add_parser("upload", help="Загрузить файл")
    upload.add_argument("file", type=str, help="Путь к локальному файлу для загрузки")
    upload.add_argument(
        "-k",
        "--key",
        type=str,
        default=None,
        help="Ключ объекта (по умолчанию — имя файла)",
    )
    upload.add_argument("-t", "--content-type", type=str, default=None, help="MIME-тип объекта")
    upload.add_argument(
        "--md5",
        action="store_true",
        help="Подписать заголовок content-md5 для проверки целостности",
    )

    delete = commands.add_parser("delete", help="Удалить объект")
    delete.add_argument("key", type=str, help="Ключ объекта")

    url = commands.add_parser("url", help="Показать публичный URL объекта")
    url.add_argument("key", type=str, help="Ключ объекта")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = Configuration()
    except ValidationError as e:
        setup_logging(level="ERROR")
        logger.error(f"Некорректная конфигурация: {e}")
        return 1

    log_level = "WARNING" if args.quiet else config.log_level
    setup_logging(level=log_level, package_log_level=config.signer_log_level)

    try:
        client = NOSClient(config)
        if args.command == "upload":
            result = client.upload_file(
                local_path=args.file,
                object_key=args.key,
                content_type=args.content_type,
                with_md5=args.md5,
            )
            if args.quiet:
                print(result["key"])
            else:
                logger.info(f"Готово: {result['url']}")
        elif args.command == "delete":
            client.delete(args.key)
            if args.quiet:
                print(args.key)
            else:
                logger.info(f"Удалено: nos://{config.default_bucket}/{args.key}")
        else:
            print(client.resource_url(args.key))
        return 0
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    except NOSError as e:
        logger.error(f"Ошибка подписи запроса: {e}")
        return 1
    except Exception as e:
        logger.exception("Ошибка запроса: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
