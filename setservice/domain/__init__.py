"""
Domain layer package.

Contains the store contract and domain errors.
No framework imports, no IO, no side effects.
"""
