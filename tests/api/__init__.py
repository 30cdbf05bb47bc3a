"""API tests package.

End-to-end tests for the trigger and payment endpoints using TestClient.
Real handlers run behind ``app.dependency_overrides``; repositories and the
mail transport are mocked, so no database is needed.
"""
