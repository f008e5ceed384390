"""
Application layer for the sets bounded context.

No framework or infrastructure imports allowed.
"""
