"""Output layer — renders pipeline outcomes for humans (Rich) or machines (JSON)."""
