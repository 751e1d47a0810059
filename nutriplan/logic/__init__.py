"""Core coordination logic for plan cards.

Subpackages:
- identity: drag identifiers derived from node coordinates
- expansion: coordinate-based expanded/collapsed keys
- routing: address composition for mutation callbacks
- reorder: sortable collections and drop resolution
- quantity: food quantity text field
- cards: render pass assembling per-node card contracts
"""
__all__ = ["identity", "expansion", "routing", "reorder", "quantity", "cards"]
