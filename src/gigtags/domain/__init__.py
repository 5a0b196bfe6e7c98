"""Domain layer: facet rules and values.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
