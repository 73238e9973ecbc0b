"""
Posts API: a small HTTP resource service for posts.

Application package root. A modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - posts: CRUD over the Post entity.

Layers:
    - domain: Entity, validation rules, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (SQLAlchemy) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
