"""
Database models package.

This package contains all the database models for the application.
All models are imported here to provide a clean API for importing elsewhere.
"""

from .user import User
from .social_content import SocialContent
from .social_content_history import SocialContentHistory

# Define __all__ to explicitly state what's available when importing from models
__all__ = ["User", "SocialContent", "SocialContentHistory"]
