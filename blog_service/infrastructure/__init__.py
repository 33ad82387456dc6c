"""
Infrastructure layer.

The infrastructure layer contains implementations of the protocols defined
in the application layer and everything that talks to the outside world:

- Persistence (SQLAlchemy ORM, repositories, mappers)
- Web framework (FastAPI routers, schemas, exception handlers)
- Dependency injection

This layer depends on domain and application layers,
but they do not depend on it.
"""
