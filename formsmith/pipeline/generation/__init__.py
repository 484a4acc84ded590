"""
AI-assisted form generation pipeline.

prompt + credential -> verified identity -> LLM call -> sanitized form -> stored rows
"""
