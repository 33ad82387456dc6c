"""
Domain layer.

The domain layer contains the core business rules of the blog service.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Post and the Author reference
- Value Objects: strongly-typed identifiers
- Domain errors: the closed set of failures the core raises
"""
