"""Domain layer — types, rules, and models.

This layer depends only on stdlib, pydantic and structlog.
It must never import from services, output, or config.
"""
