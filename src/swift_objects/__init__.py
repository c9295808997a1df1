"""Client-side resources for objects in a Swift-style object store."""
from .account import Account
from .container import Container
from .data_object import DataObject
from .metadata import MetadataStore
from .settings import Settings, create_settings_from_env
from .signing import HmacSigner
from .storage.base import UrlType
from .storage.errors import (
    CdnNotAvailableError,
    ErrorKind,
    HttpStatusError,
    MissingNameError,
    ObjectNotEmptyError,
    ObjectNotFoundError,
    ObjectStoreError,
    PseudoDirectoryError,
    SigningSecretUnavailableError,
    TransportError,
    UnsupportedMethodError,
)
from .symlink import SymlinkManager
from .temp_url import SignedUrlRequest, TemporaryUrlBuilder

__all__ = [
    "Account",
    "Container",
    "DataObject",
    "MetadataStore",
    "Settings",
    "create_settings_from_env",
    "HmacSigner",
    "UrlType",
    "CdnNotAvailableError",
    "ErrorKind",
    "HttpStatusError",
    "MissingNameError",
    "ObjectNotEmptyError",
    "ObjectNotFoundError",
    "ObjectStoreError",
    "PseudoDirectoryError",
    "SigningSecretUnavailableError",
    "TransportError",
    "UnsupportedMethodError",
    "SymlinkManager",
    "SignedUrlRequest",
    "TemporaryUrlBuilder",
]
