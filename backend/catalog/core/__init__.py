"""
Core - configuration, database, container and error handling
"""
