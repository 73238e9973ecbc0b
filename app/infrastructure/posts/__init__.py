"""
Infrastructure adapters for the posts bounded context.

Each adapter implements a domain port (ABC) or reads an
external source of posts.
"""
