"""Domain layer for the accountability context."""
