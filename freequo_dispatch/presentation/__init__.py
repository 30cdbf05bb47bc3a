"""Presentation layer: HTTP surface of the dispatcher."""
