"""
Pydantic schema definitions for API payloads.

Schemas describe request and response bodies and are kept apart from
the service layer that stores and mutates the records.
"""
