"""
Asset-related Pydantic models.

The ledger reader produces a TokenConfig; the viewer wraps it together
with the resolved metadata into an NFTAsset.
"""

from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .metadata import ResolvedMetadata


class Network(str, Enum):
    """Ledger environment an asset lives on."""

    MAINNET = "mainnet"
    TESTNET = "testnet"

    @classmethod
    def from_flag(cls, is_mainnet: bool) -> "Network":
        return cls.MAINNET if is_mainnet else cls.TESTNET


class TokenConfig(BaseModel):
    """
    Asset configuration record as returned by the ledger.

    Only ``url``, ``reserve`` and ``name`` are interpreted; the other
    administrative fields are carried through untouched.
    """

    url: Optional[str] = Field(None, description="Asset url")
    reserve: Optional[Union[str, bytes]] = Field(
        None,
        description="Reserve address, or its raw 32-byte public key",
    )
    name: Optional[str] = Field(None, description="Asset name")
    creator: Optional[str] = None
    manager: Optional[str] = None
    freeze: Optional[str] = None
    clawback: Optional[str] = None
    unit_name: Optional[str] = Field(None, alias="unit-name")
    total: Optional[int] = None
    decimals: Optional[int] = None

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Example #1",
                "unit-name": "EX1",
                "url": "template-ipfs://{ipfscid:1:raw:reserve:sha2-256}",
                "reserve": "AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAY5HFKQ",
                "total": 1,
                "decimals": 0,
            },
        },
    )

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "TokenConfig":
        """Build from the ``params`` object of an algod asset response."""
        return cls.model_validate(params)


class NFTAsset(BaseModel):
    """An asset together with its resolved metadata."""

    index: int = Field(..., description="Asset id")
    params: TokenConfig = Field(..., description="On-chain configuration")
    arc_metadata: ResolvedMetadata = Field(..., description="Resolved metadata")

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "params": self.params.model_dump(mode="json", by_alias=True, exclude_none=True),
            "arc_metadata": self.arc_metadata.to_dict(),
        }
