"""In-memory repository adapters."""
