"""External service collaborators (auth and relational store)."""
