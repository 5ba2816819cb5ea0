"""
Listify tools package

Exports the integration entrypoints that live under `listify/tools`:
  - fetch_seller_sales       (typed SellerSalesResult)
  - run_seller_sales_tool    (JSON-ready dict for API/agent callers)
  - build_seller_search_url

Core parsing helpers should be imported from `listify.core.normalize` directly.
"""

from __future__ import annotations

from .seller_sales import build_seller_search_url, fetch_seller_sales, run_seller_sales_tool

__all__ = ["fetch_seller_sales", "run_seller_sales_tool", "build_seller_search_url"]
