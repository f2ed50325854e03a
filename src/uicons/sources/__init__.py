"""Collections of UICONS repositories built from configuration."""

from .manager import SourceManager

__all__ = ["SourceManager"]
