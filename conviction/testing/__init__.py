"""Testing helpers for conviction."""

from conviction.testing.memory import DocumentRejected, InMemoryNetwork

__all__ = ["DocumentRejected", "InMemoryNetwork"]
