"""Domain layer: scalars, the Date aggregate, parsing, formatting, arithmetic.

This layer depends only on stdlib and pydantic.
It must never import from services, config, output, or commands.
"""
