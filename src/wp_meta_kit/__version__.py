"""Version information for wp-meta-kit."""

__version__ = "0.1.0"
