"""Infrastructure adapters for payload sources, settings and logging."""
