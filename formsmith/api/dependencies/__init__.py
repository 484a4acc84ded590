"""
FastAPI dependencies for request processing.

Dependencies hand the long-lived pipeline objects built at startup to endpoints.
"""
