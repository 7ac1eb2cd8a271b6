"""Settings system — async JSON settings loader/saver with defaults merging."""

from nova.config.config import Config
from nova.config.defaults import DEFAULT_CONFIG

__all__ = ["Config", "DEFAULT_CONFIG"]
