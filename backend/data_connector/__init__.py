"""Data connectors (read-only sources)."""
