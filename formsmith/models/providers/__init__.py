"""LLM provider implementations behind a common chat interface."""
