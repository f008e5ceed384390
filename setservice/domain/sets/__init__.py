"""
Sets bounded context — domain layer.

Defines what a set store must do and which errors
the rest of the application may raise about a request.
"""
