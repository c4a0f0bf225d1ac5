"""Restaurant menu publishing service."""
