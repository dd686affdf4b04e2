"""Computer opponent policies."""
