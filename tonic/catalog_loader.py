# catalog_loader.py
"""
Builds the Catalog at startup.

Source order for "supabase": fresh on-disk snapshot, then a remote fetch
(written back to the cache), then a stale snapshot, then the bundled seed
tables. "cache" skips the remote fetch and "static" always uses the seed tables.
"""

import json
import logging
import os
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

from tonic.catalog import Catalog, CatalogError, build_static_catalog
from tonic.supabase_client import get_supabase_client, supabase_configured

logger = logging.getLogger("uvicorn.error")

KB_TABLES = (
    "supplements",
    "supplement_goal_map",
    "drug_interactions",
    "contraindications",
    "synergistic_pairings",
)
SCHEMA_VERSION = 1
STALENESS_THRESHOLD = timedelta(hours=24)
CATALOG_SOURCES = ("static", "cache", "supabase")


def default_cache_dir() -> Path:
    return Path(os.getenv("TONIC_CACHE_DIR") or Path.home() / ".tonic" / "knowledge_base")


class SnapshotCache:
    """snapshot.json + metadata.json ({last_fetched_at, schema_version}) in one directory."""

    def __init__(self, directory: Optional[Path] = None):
        self.directory = Path(directory) if directory else default_cache_dir()
        self.snapshot_path = self.directory / "snapshot.json"
        self.metadata_path = self.directory / "metadata.json"

    def save(self, snapshot: dict, now: Optional[datetime] = None) -> None:
        now = now or datetime.now(timezone.utc)
        self.directory.mkdir(parents=True, exist_ok=True)
        with open(self.snapshot_path, "w", encoding="utf-8") as f:
            json.dump(snapshot, f)
        with open(self.metadata_path, "w", encoding="utf-8") as f:
            json.dump({"last_fetched_at": now.isoformat(), "schema_version": SCHEMA_VERSION}, f)

    def _read_json(self, path: Path) -> Optional[dict]:
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Unreadable knowledge-base cache file {path}: {e}")
            return None

    def metadata(self) -> Optional[dict]:
        meta = self._read_json(self.metadata_path)
        if not meta or meta.get("schema_version") != SCHEMA_VERSION:
            return None
        return meta

    def is_fresh(self, now: Optional[datetime] = None) -> bool:
        meta = self.metadata()
        if not meta:
            return False
        try:
            fetched_at = datetime.fromisoformat(meta["last_fetched_at"])
        except (KeyError, TypeError, ValueError):
            return False
        if fetched_at.tzinfo is None:
            fetched_at = fetched_at.replace(tzinfo=timezone.utc)
        now = now or datetime.now(timezone.utc)
        return now - fetched_at < STALENESS_THRESHOLD

    def load(self, ignore_staleness: bool = False, now: Optional[datetime] = None) -> Optional[dict]:
        if not ignore_staleness and not self.is_fresh(now):
            return None
        return self._read_json(self.snapshot_path)


def fetch_snapshot(client) -> dict:
    """Pull every knowledge-base table from Supabase."""
    return {table: client.table(table).select("*").execute().data or [] for table in KB_TABLES}


def load_catalog(
    source: Optional[str] = None,
    cache_dir: Optional[Path] = None,
    client=None,
    now: Optional[datetime] = None,
) -> Catalog:
    source = (source or os.getenv("TONIC_CATALOG_SOURCE") or ("supabase" if supabase_configured() else "static")).lower()
    if source not in CATALOG_SOURCES:
        raise CatalogError(f"Unknown catalog source {source!r}; expected one of {', '.join(CATALOG_SOURCES)}")

    if source == "static":
        logger.info("Catalog source: bundled knowledge base")
        return build_static_catalog()

    cache = SnapshotCache(cache_dir)

    fresh = cache.load(now=now)
    if fresh is not None:
        logger.info(f"Catalog source: fresh cache at {cache.directory}")
        return Catalog.from_snapshot(fresh)

    if source == "supabase":
        client = client or get_supabase_client()
        if client is not None:
            try:
                snapshot = fetch_snapshot(client)
            except Exception as e:
                logger.warning(f"Supabase knowledge-base fetch failed: {e}")
            else:
                catalog = Catalog.from_snapshot(snapshot)
                cache.save(snapshot, now=now)
                logger.info(f"Catalog source: Supabase ({len(snapshot['supplements'])} supplements)")
                return catalog

    stale = cache.load(ignore_staleness=True)
    if stale is not None:
        logger.warning(f"Catalog source: stale cache at {cache.directory}")
        return Catalog.from_snapshot(stale)

    logger.warning("Catalog source: falling back to bundled knowledge base")
    return build_static_catalog()
