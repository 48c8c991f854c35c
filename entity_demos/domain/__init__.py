"""
Domain Layer

Business entities and domain logic.
Contains the keyed entity store, domain models, error kinds and services.
No dependencies on external frameworks.
"""
