"""NFT viewer API package."""
