"""
Pydantic schema definitions for API payloads.

Schemas are separated from the domain models to decouple the API
representation from the entities the services work with.
"""
