"""Configuration from environment."""
import os

PORT = int(os.environ.get("PORT", "8001"))

# Key under which the whole location collection is stored.
LOCATIONS_KEY = os.environ.get("LOCATIONS_KEY", "savedLocations")

# When TESTING=true, use test DB URL so tests never touch the real log.
if os.environ.get("TESTING") == "true":
    DATABASE_URL = os.environ.get("TESTING_DATABASE_URL", "sqlite:///:memory:")
else:
    DATABASE_URL = os.environ.get(
        "DATABASE_URL",
        "sqlite:///./fishlog.db",
    )
