"""Request handlers grouped by entity."""
