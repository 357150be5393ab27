"""Repository interfaces and implementations.

This package defines abstract repository interfaces for the todo entities and
the in-memory implementations under :mod:`todo_backend.repositories.memory`.
"""
