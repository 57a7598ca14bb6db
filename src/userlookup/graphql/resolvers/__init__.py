"""
GraphQL resolver functions
"""
