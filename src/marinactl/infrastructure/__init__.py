"""Infrastructure layer — flat-file persistence for the registry.

Infrastructure may import pure parsing helpers from the domain layer
(correct dependency direction: infrastructure -> domain).
It must never import from services, commands, or output.
"""
