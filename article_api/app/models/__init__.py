"""
Domain models.

Models are plain Python objects with no framework or storage
dependencies.  The service layer maps them to and from database rows
and the schemas map them to API payloads.
"""
