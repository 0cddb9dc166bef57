"""Core: config, logging, exception handlers, and service composition."""

from apex.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
