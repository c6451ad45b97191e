"""Application services (presenters)."""
