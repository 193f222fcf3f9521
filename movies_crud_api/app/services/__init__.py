"""
Service layer abstraction.

Services own application state and encapsulate the operations the
HTTP handlers perform on it.
"""
