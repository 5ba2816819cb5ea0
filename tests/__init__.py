# tests/__init__.py
"""
Expose common test utilities so tests can import directly:
    from tests import make_item, make_results_page
"""

from .utils import make_card, make_item, make_results_page

__all__ = ["make_item", "make_card", "make_results_page"]
