"""
Application layer package.

Contains the request handler that mediates between the transport
layer and the store. Depends on domain ports, never on infrastructure.
"""
