"""
Service layer abstraction.

Services encapsulate access to the record store so that API handlers
never issue SQL themselves.
"""
