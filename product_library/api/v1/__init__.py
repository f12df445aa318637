"""
==============================================================================
API v1 Endpoints
==============================================================================

Version 1 of the REST API.

Routers:
--------
- health: Health check endpoints
- products: Product library browsing and editing
- company: Company catalog curation
- categories: Category tree management

==============================================================================
"""

from . import health, products, company, categories

__all__ = ["health", "products", "company", "categories"]
