"""Store and analytics configuration read from the environment."""

import os


class StoreConfig:
    """Durable store and statistics settings."""

    STORE_BACKEND = os.environ.get("STORE_BACKEND", "file").lower()
    STORE_DIR = os.environ.get("STORE_DIR", ".data")
    STORE_TABLE = os.environ.get("STORE_TABLE", "kv_store")
    STATS_WINDOW_DAYS = int(os.environ.get("STATS_WINDOW_DAYS", "30"))
    REPORT_TOP_N = int(os.environ.get("REPORT_TOP_N", "5"))

    # One durable key per collection
    PROPERTIES_KEY = "real_estate_properties"
    AGENTS_KEY = "real_estate_agents"
    DEVELOPERS_KEY = "real_estate_developers"
    USERS_KEY = "users"
    INQUIRIES_KEY = "inquiries"
    VIEWS_KEY = "views_data"
