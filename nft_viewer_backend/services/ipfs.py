"""
IPFS url handling.

Turns the url forms found in asset configs and metadata documents into
https urls a browser can load:

- ``ipfs://<cid>/<path>``  -> ``<gateway><cid>/<path>``
- ``https://...``          -> unchanged
- ``template-ipfs://{ipfscid:<version>:<codec>:reserve:sha2-256}/<path>``
  (ARC19) -> the CID is rebuilt from the asset's reserve address, then
  handled like ``ipfs://``.

The reserve address is never hashed: its 32-byte public key *is* the
sha2-256 digest the CID wraps.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Union

from algosdk import encoding
from loguru import logger
from multiformats import CID, multihash

from ..exceptions import (
    InvalidReserveAddress,
    UnsupportedCodec,
    UnsupportedField,
    UnsupportedHashFunction,
    UnsupportedIdentifierFormat,
)
from ..models.metadata import ContentLocator, LocatorScheme
from ..settings import Settings

CID_CODEC_CODES: Dict[str, int] = {
    "raw": 0x55,
    "dag-pb": 0x70,
}
SUPPORTED_HASH = "sha2-256"
SUPPORTED_FIELD = "reserve"
RESERVE_KEY_LENGTH = 32


@dataclass(frozen=True)
class TemplateComponents:
    """Parsed ``{ipfscid:...}`` placeholder."""
    version: int
    codec: str
    field: str
    hash_function: str

    @property
    def codec_code(self) -> int:
        return CID_CODEC_CODES[self.codec]


def parse_template(segment: str) -> TemplateComponents:
    """
    Parse the part of an ARC19 url after ``template-ipfs://``.

    Raises:
        UnsupportedIdentifierFormat: wrong number of components or bad version
        UnsupportedHashFunction: hash is not sha2-256
        UnsupportedCodec: codec is neither raw nor dag-pb
        UnsupportedField: the digest is not read from the reserve field
    """
    components = segment.split(":")
    if len(components) != 5:
        raise UnsupportedIdentifierFormat(f"unknown ipfscid format: {segment}")

    _, version, codec, field, hash_function = components
    hash_function = hash_function.split("}")[0]

    if hash_function != SUPPORTED_HASH:
        raise UnsupportedHashFunction(f"unsupported hash: {hash_function}")
    if codec not in CID_CODEC_CODES:
        raise UnsupportedCodec(f"unsupported codec: {codec}")
    if field != SUPPORTED_FIELD:
        raise UnsupportedField(f"unsupported asa field: {field}")

    try:
        version_number = int(version)
    except ValueError as e:
        raise UnsupportedIdentifierFormat(f"invalid cid version: {version}") from e

    return TemplateComponents(
        version=version_number,
        codec=codec,
        field=field,
        hash_function=hash_function,
    )


def decode_reserve(reserve: Union[str, bytes]) -> bytes:
    """
    Return the 32-byte public key behind a reserve address.

    Raises:
        InvalidReserveAddress: the address is malformed or has a bad checksum
    """
    if reserve is None:
        raise InvalidReserveAddress("Asset has no reserve address")
    if isinstance(reserve, (bytes, bytearray)):
        public_key = bytes(reserve)
    else:
        try:
            public_key = encoding.decode_address(reserve)
        except Exception as e:
            raise InvalidReserveAddress(f"Cannot decode reserve address {reserve!r}: {e!r}") from e

    if not isinstance(public_key, bytes) or len(public_key) != RESERVE_KEY_LENGTH:
        raise InvalidReserveAddress(f"Reserve must decode to {RESERVE_KEY_LENGTH} bytes: {reserve!r}")
    return public_key


def reserve_to_cid(components: TemplateComponents, reserve: Union[str, bytes]) -> CID:
    """
    Build the CID whose sha2-256 digest is the reserve public key.

    Raises:
        InvalidReserveAddress: ``reserve`` is not a valid address
        UnsupportedIdentifierFormat: version and codec do not form a valid CID
    """
    digest = multihash.wrap(decode_reserve(reserve), SUPPORTED_HASH)
    # CIDv0 only exists as base58btc
    base = "base58btc" if components.version == 0 else "base32"
    try:
        return CID(base, components.version, components.codec_code, digest)
    except (ValueError, KeyError) as e:
        raise UnsupportedIdentifierFormat(
            f"cannot build CIDv{components.version} with codec {components.codec}: {e}"
        ) from e


class TemplateResolver:
    """
    Resolves asset urls to https urls.

    All scheme names, the gateway prefix and the ARC3 suffix come from
    ``Settings`` so alternative gateways can be configured.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.gateway_prefix = self.settings.ipfs_gateway_prefix

    def strip_arc3_suffix(self, url: str) -> str:
        """Drop a trailing ``#arc3`` marker."""
        suffix = self.settings.arc3_url_suffix
        if suffix and url.endswith(suffix):
            return url[: -len(suffix)]
        return url

    def resolve(self, url: str, reserve: Union[str, bytes, None] = None) -> str:
        """
        Resolve ``url``, rebuilding an ARC19 template from ``reserve``.

        Unsupported templates are logged and echoed back unchanged; unknown
        schemes are passed through.

        Raises:
            InvalidReserveAddress: the template is valid but ``reserve`` is not
        """
        url = self.strip_arc3_suffix(url)
        chunks = url.split("://", 1)
        scheme = chunks[0]
        remainder = chunks[1] if len(chunks) > 1 else ""

        if (
            scheme == self.settings.template_ipfs_scheme
            and remainder.startswith(self.settings.template_ipfs_cid_token)
        ):
            template, _, tail = remainder.partition("/")
            try:
                cid = reserve_to_cid(parse_template(template), reserve)
            except UnsupportedIdentifierFormat as e:
                logger.info(f"Leaving templated url unresolved, {e}: {url}")
                return url

            scheme = self.settings.ipfs_scheme
            remainder = f"{cid}/{tail}"
            logger.debug(f"Resolved {url} to {scheme}://{remainder}")

        if scheme == self.settings.ipfs_scheme:
            return f"{self.gateway_prefix}{remainder}"
        # https and unknown schemes pass through
        return url

    def to_locator(self, url: Optional[str]) -> Optional[ContentLocator]:
        """
        Normalize a media or metadata url.

        ``ipfs://`` is rewritten to the gateway, ``https://`` is kept, and
        anything else (including non-string values from a document) is
        unresolved.
        """
        if not url or not isinstance(url, str):
            return None
        ipfs_prefix = self.settings.ipfs_url_prefix
        if url.startswith(ipfs_prefix):
            return ContentLocator(
                url=f"{self.gateway_prefix}{url[len(ipfs_prefix):]}",
                scheme=LocatorScheme.CONTENT_ADDRESSED,
            )
        if url.startswith(self.settings.https_url_prefix):
            return ContentLocator(url=url, scheme=LocatorScheme.DIRECT_WEB)
        return None

    def to_https(self, url: Optional[str]) -> Optional[str]:
        locator = self.to_locator(url)
        return locator.url if locator else None

    def resolve_locator(self, url: str, reserve: Union[str, bytes, None] = None) -> Optional[ContentLocator]:
        """
        Resolve ``url`` and wrap the outcome, or None when it stayed unresolved.

        The locator scheme follows the scheme ``url`` was written in, so an
        https gateway url stays direct-web.
        """
        source = self.strip_arc3_suffix(url)
        resolved = self.resolve(url, reserve)
        if source.startswith(self.settings.https_url_prefix):
            return ContentLocator(url=resolved, scheme=LocatorScheme.DIRECT_WEB)
        if resolved != source and resolved.startswith(self.gateway_prefix):
            return ContentLocator(url=resolved, scheme=LocatorScheme.CONTENT_ADDRESSED)
        return None
