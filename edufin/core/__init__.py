"""Core domain layer: entities, pricing, and ports."""
