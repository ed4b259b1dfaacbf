"""Application layer for the accountability context."""
