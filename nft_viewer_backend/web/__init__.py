"""NFT viewer web server."""
