"""
Posts bounded context: domain layer.

Contains the Post entity, its validation rules, the persistence
port and the errors raised when a request cannot be fulfilled.
"""
