"""
FastAPI dependency injection.

An endpoint declares `settings: Settings = Depends(get_settings)` and
FastAPI hands it the configuration. Tests swap it out through
app.dependency_overrides[get_settings] instead of patching env vars.
"""

from config.settings import Settings, settings


def get_settings() -> Settings:
    """Returns the process-wide settings singleton."""
    return settings
