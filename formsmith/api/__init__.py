"""
FastAPI application layer for formsmith.

Exposes the form generation pipeline over HTTP for the form builder frontend.
"""
