"""
Domain layer - Core business entities and domain logic.

This layer contains the fundamental business objects and rules,
independent of any infrastructure or framework concerns.
"""
