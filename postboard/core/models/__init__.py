"""API-facing models of Postboard. See ``postboard.core.models.io``."""
