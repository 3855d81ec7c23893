"""Geeta commerce backend.

Catalog, stock, storefront marketing and after-sales workflows for the
admin, seller, delivery and customer apps, plus the client-side helpers
those apps use to edit stock in bulk and run the point of sale.
"""

__version__ = "0.1.0"
