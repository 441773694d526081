"""
Walks Service.

CRUD API for hiking walks, the regions they are in and their difficulty
ratings.
"""

__version__ = "1.0.0"
