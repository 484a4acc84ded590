"""
formsmith: conversational form builder backend.

Hosts the AI-assisted form generation pipeline behind a FastAPI service.
"""

__version__ = "1.0.0"
