"""Pydantic schemas for untyped payloads and the HTTP surface."""
