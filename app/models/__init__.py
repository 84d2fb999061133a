"""
Database models package.
"""

from app.models.opening import Opening

__all__ = ["Opening"]
