"""Application layer - Use cases and orchestration.

This layer contains the application's use cases following the CQRS pattern:
- Commands: Write operations (restaurants, dishes, accounts)
- Queries: Read operations (listing, lookups, policies, weather)

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- validators/: Input validation returning field/message pairs
- services/: Ownership verification and requirement policies
- dtos/: Results handed to the presentation layer
- errors/: ApplicationError wrapping domain errors

The application layer orchestrates domain logic; it never imports
infrastructure.
"""
