"""Domain layer — coordinates, lifecycle states, errors, deployable types.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
