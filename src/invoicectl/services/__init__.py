"""Service layer — the validated mutation pipeline and credential gate.

Services may import from domain and config models.
They must never import from commands, output, or infrastructure.
"""
