"""HTTP API for note processing."""
