"""
Catalog API - product catalog REST service
"""
