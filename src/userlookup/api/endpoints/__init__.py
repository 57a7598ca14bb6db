"""
REST and documentation routers
"""
