"""
HTTP API for the storefront.

A single FastAPI application exposing the checkout, account and store-status
operations of the storefront services.
"""

from api.main import app

__all__ = ["app"]
