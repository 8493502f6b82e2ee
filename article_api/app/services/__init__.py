"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  API handlers
call services and never touch the database directly.
"""
