"""Domain layer - Wall-clock readings, resolutions and rules.

This layer contains:
- Value Objects: Immutable readings and results (e.g., CivilTime, ResolvedTime)
- Outcomes: The Resolved / Ambiguous result variants
- Domain Exceptions: Missing context and malformed input

The domain layer has NO dependencies on external libraries or infrastructure.
"""
