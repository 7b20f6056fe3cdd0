"""I/O utilities: filesystem checks and entry table loading."""

from infrastructure.io.datasets import read_table
from infrastructure.io.fs import ensure_exists

__all__ = [
    "ensure_exists",
    "read_table",
]
