# Schemas package init
"""Pydantic request DTOs and camelCase response models for the HTTP layer."""
