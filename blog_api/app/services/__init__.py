"""
Service layer abstraction.

Services encapsulate the business logic for a domain.  Route handlers
receive a service instance through a dependency instead of touching
module level state, so every application (and every test) can own an
independent store.
"""
