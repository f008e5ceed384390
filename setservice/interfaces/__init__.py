"""
Interfaces layer package.

Contains the FastAPI route table, Pydantic schemas and request
dependencies. No business logic belongs here.
Routes call the request handler and encode its result.
"""
