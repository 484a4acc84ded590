"""
Model access layer: LLM providers, external services, prompts and task routing.
"""
