"""Authentication providers for the WordPress REST API."""

from .application_password import ApplicationPasswordAuth

__all__ = ["ApplicationPasswordAuth"]
