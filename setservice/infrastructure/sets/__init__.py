"""
Infrastructure adapters for the sets bounded context.
"""
