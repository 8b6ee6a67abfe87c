"""HTTP adapter for the workshop guards."""

from workshopguard.api.app import app

__all__ = ["app"]
