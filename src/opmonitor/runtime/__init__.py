"""Sequential drivers built on the core operations."""
