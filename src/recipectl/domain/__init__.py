"""Domain layer — recipe models, verdicts, and errors.

This layer depends only on stdlib and pydantic.
It must never import from services, validators, commands, or config.
"""
