"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  The joke
store keeps its records in memory; handlers receive the store through
a dependency so tests can inject their own instance.
"""
