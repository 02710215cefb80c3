"""Core type definitions."""

from typing import NewType

# URL path for routing (e.g., "/observer", "/factory-method")
# Distinct from the document path ("assets/observer.md") to catch mix-ups
URLPath = NewType("URLPath", str)
