"""
Storefront - catalog consumer

Loads products from the Catalog API (falling back to a bundled dataset),
holds filter state and derives the filtered/sorted view.
"""
