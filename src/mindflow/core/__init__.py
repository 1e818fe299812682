"""Framework layer: settings and startup validation."""
