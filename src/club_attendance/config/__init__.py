import os


def get_settings_module() -> str:
    # Environment comes from APP_ENV, defaulting to 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "club_attendance.config.production"

    if env in {"test", "testing"}:
        return "club_attendance.config.testing"

    return "club_attendance.config.development"


def env_list(name: str, default):
    """Comma-separated env override for list settings (e.g. SECTIONS)."""
    raw = os.getenv(name)
    if not raw:
        return tuple(default)
    return tuple(item.strip() for item in raw.split(",") if item.strip())
