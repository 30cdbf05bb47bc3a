"""Application layer: the dispatch pipeline, its services and command handlers."""
