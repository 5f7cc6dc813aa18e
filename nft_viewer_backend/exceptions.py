"""
NFT viewer exceptions.

Custom exceptions for the asset metadata resolution pipeline.
"""

from typing import Dict


class MetadataResolutionException(Exception):
    """Base exception for resolution errors."""
    pass


class AssetNotFound(MetadataResolutionException):
    """Exception raised when the ledger has no asset with the requested id."""
    pass


class MissingRequiredField(MetadataResolutionException):
    """Exception raised when a convention needs a config field the asset does not set."""
    pass


class InvalidReserveAddress(MetadataResolutionException):
    """Exception raised when the reserve field cannot be decoded to a 32-byte key."""
    pass


class UnsupportedIdentifierFormat(MetadataResolutionException):
    """Exception raised when a templated url cannot be interpreted."""
    pass


class UnsupportedCodec(UnsupportedIdentifierFormat):
    """Exception raised when a templated url names a codec other than raw or dag-pb."""
    pass


class UnsupportedHashFunction(UnsupportedIdentifierFormat):
    """Exception raised when a templated url names a hash other than sha2-256."""
    pass


class UnsupportedField(UnsupportedIdentifierFormat):
    """Exception raised when a templated url reads a field other than reserve."""
    pass


class TransportFailure(MetadataResolutionException):
    """Exception raised when a network call fails."""
    pass


class MalformedDocument(MetadataResolutionException):
    """Exception raised when a fetched document is not the expected JSON shape."""
    pass


class ResolutionFailed(MetadataResolutionException):
    """Exception raised when every applicable standard failed."""

    def __init__(self, errors: Dict[str, Exception]):
        self.errors = dict(errors)
        details = "; ".join(f"{standard}: {error!r}" for standard, error in self.errors.items())
        super().__init__(f"All applicable standards failed ({details})")
