"""HTTP API layer, grouped by version."""
