"""
API Layer - FastAPI routers
"""
