"""
Users Backend - CRUD service for the User entity
"""

__version__ = "1.0.0"
