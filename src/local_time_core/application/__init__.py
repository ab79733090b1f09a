"""Application layer - Use cases and port definitions.

This layer contains:
- Use Cases: Resolving wall-clock readings and reading the local clock
- Ports: Abstract interfaces for the conversion primitive, the active
  rule and the system clock

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
