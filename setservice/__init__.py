"""
setservice — a shared set of strings over HTTP.

Application package root. A small service laid out with hexagonal
architecture (ports & adapters).

Bounded contexts:
    - sets: Add values to, and read back, a process-wide string set.

Layers:
    - domain: Store contract (ABC) and domain errors.
    - application: The request handler and its explicit result type.
    - infrastructure: The in-memory, lock-guarded store.
    - interfaces: FastAPI route table, Pydantic schemas, dependencies.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
