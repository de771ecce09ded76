"""Subpackage aggregating individual auth route modules."""

__all__ = [
    "register",
    "login",
    "me",
]
