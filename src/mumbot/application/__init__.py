"""Application layer - the log-driven presence core."""
