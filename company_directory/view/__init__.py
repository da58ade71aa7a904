"""
Client side of the directory.

``engine`` turns the cached record list into the page currently shown,
``reconciler`` patches that cache after confirmed server mutations and
``session`` wires both to the HTTP client.
"""

from .engine import ViewResult, compute_view
from .reconciler import apply_create, apply_delete, apply_update
from .state import FilterSpec, Pagination, SortSpec, ViewState

__all__ = [
    "FilterSpec",
    "Pagination",
    "SortSpec",
    "ViewResult",
    "ViewState",
    "apply_create",
    "apply_delete",
    "apply_update",
    "compute_view",
]
