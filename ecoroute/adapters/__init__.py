"""Route data providers and fault injection."""
