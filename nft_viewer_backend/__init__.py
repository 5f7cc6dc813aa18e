"""nft_viewer_backend package."""
