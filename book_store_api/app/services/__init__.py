"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  The book
store keeps its records in memory; a persistent backend could replace
it without changing the API handlers.
"""
