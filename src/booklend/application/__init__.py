"""Application layer: one command or query per use case."""
