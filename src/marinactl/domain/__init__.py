"""Domain layer — records, registry, codec, and fee rules.

This layer depends only on the standard library.
It must never import from services, infrastructure, commands, or config.
"""
