"""Domain layer: asset model, amount parsing, validators, operation checks.

This layer depends only on stdlib, the error taxonomy and the codec
adapters.  It must never import from services, commands, output or config.
"""
