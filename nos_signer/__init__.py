"""Подпись запросов к объектному хранилищу NOS"""

from nos_signer.config import Configuration
from nos_signer.exceptions import ConfigurationError, EncodingError, NOSError

__all__ = ["Configuration", "ConfigurationError", "EncodingError", "NOSError"]
