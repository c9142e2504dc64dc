import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


class Settings:
    APP_VERSION: str = "1.0.0"
    RULESET_VERSION: str = "visa-rules-2026.1"

    # --- CONFIG ---
    ENV = os.getenv("VISADESK_ENV", "production")

    # Reference-constant schedule used when a caller does not inject one
    POLICY_YEAR = int(os.getenv("VISADESK_POLICY_YEAR", "2026"))

    # --- PATHWAY SEARCH LIMITS ---
    MAX_PATHWAY_HOPS = int(os.getenv("VISADESK_MAX_PATHWAY_HOPS", "4"))


@lru_cache
def get_settings():
    return Settings()
