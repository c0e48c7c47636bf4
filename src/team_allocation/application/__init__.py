"""Application layer - allocation use cases."""
