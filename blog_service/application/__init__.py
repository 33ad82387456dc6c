"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains the services that represent the operations
available to external actors, and the protocols of the collaborators those
services depend on.
"""
