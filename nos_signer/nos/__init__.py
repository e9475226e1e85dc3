"""Модуль подписи запросов к NOS"""

from nos_signer.nos.authorizer import Operation, RequestAuthorizer
from nos_signer.nos.client import NOSClient
from nos_signer.nos.dates import format_date, parse_date
from nos_signer.nos.endpoint import EndpointResolver
from nos_signer.nos.headers import normalize_headers
from nos_signer.nos.resource import ResourceObject
from nos_signer.nos.signature import compute_signature, content_hash, sign, string_to_sign

__all__ = [
    "EndpointResolver",
    "NOSClient",
    "Operation",
    "RequestAuthorizer",
    "ResourceObject",
    "compute_signature",
    "content_hash",
    "format_date",
    "normalize_headers",
    "parse_date",
    "sign",
    "string_to_sign",
]
