"""workshopguard: validation, repair workflow and capacity guards for a
field-service back office."""

__version__ = "0.1.0"
