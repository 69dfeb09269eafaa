"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- HTTP transport
- Cache stores (memory, file, Redis)
- Rate providers and the cache-aside decorator
- Formatting (output)
"""

__all__ = []
