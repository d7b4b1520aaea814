# supabase_client.py

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from supabase import Client, create_client

load_dotenv()  # Load .env variables before using them

logger = logging.getLogger("uvicorn.error")

_client: Optional[Client] = None


def supabase_configured() -> bool:
    return bool(os.getenv("SUPABASE_URL") and os.getenv("SUPABASE_KEY"))


def get_supabase_client() -> Optional[Client]:
    """Shared client, created on first use. None when SUPABASE_URL / SUPABASE_KEY are unset."""
    global _client
    if _client is None:
        if not supabase_configured():
            logger.info("Supabase not configured; remote knowledge base disabled")
            return None
        _client = create_client(os.getenv("SUPABASE_URL"), os.getenv("SUPABASE_KEY"))
    return _client
