"""Infrastructure layer - Adapters implementing domain protocols.

Structure:
- persistence/: SQLAlchemy models, database wrapper, repositories
- security/: bcrypt password hashing, JWT access tokens
- events/: in-memory event bus and logging subscriber
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
