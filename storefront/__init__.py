"""Storefront product catalog client and typeahead search."""
