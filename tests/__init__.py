"""Test suite for freequo_dispatch.

Test structure follows the test pyramid:
- unit/: Unit tests - domain and application logic in isolation
- integration/: Integration tests - repositories and the dispatch pipeline
  over an in-process SQLite database
- api/: API endpoint tests - HTTP endpoints end-to-end via TestClient
"""
