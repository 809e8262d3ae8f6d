"""
Recipe Nutrition — Result Cache
===============================
- Cache key: stable JSON of (normalized ingredient lines, servings)
- In-memory cache (default), LRU-bounded cache, JSON-file backed cache
- All caches share get(key) / put(key, value) so the resolver never
  depends on a storage policy
"""

import os
import json
import asyncio
import threading
from collections import OrderedDict
from typing import Any, Dict, List, Optional, Protocol, Union

from dotenv import load_dotenv

from tools.nutrition_models import IngredientRequest, NutrientProfile, coerce_ingredients

# =============================================================================
# CONFIGURATION
# =============================================================================
load_dotenv()

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATA_DIR = os.path.join(BASE_DIR, "data")

CACHE_BACKEND = os.environ.get("NUTRITION_CACHE_BACKEND", "memory").lower()
CACHE_FILE = os.environ.get("NUTRITION_CACHE_FILE", os.path.join(DATA_DIR, "nutrition_cache.json"))
CACHE_SIZE = int(os.environ.get("NUTRITION_CACHE_SIZE", "1024"))


# =============================================================================
# CACHE KEY
# =============================================================================
def build_cache_key(
    ingredients: List[Union[IngredientRequest, Dict[str, Any]]],
    servings: float,
) -> str:
    """
    Stable key for an ingredient list + serving count.

    Names are lowercased and trimmed; quantity and unit are kept verbatim.
    Ingredient order is part of the key.
    """
    payload = {
        "ingredients": [
            {"n": ing.name.strip().lower(), "q": ing.quantity, "u": ing.unit}
            for ing in coerce_ingredients(ingredients)
        ],
        "servings": servings,
    }
    return json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


# =============================================================================
# CACHE INTERFACE
# =============================================================================
class NutritionCache(Protocol):
    def get(self, key: str) -> Optional[NutrientProfile]: ...

    def put(self, key: str, value: NutrientProfile) -> None: ...

    def __len__(self) -> int: ...


class InMemoryNutritionCache:
    """Process-wide dict. Never evicts."""

    def __init__(self):
        self._entries: Dict[str, NutrientProfile] = {}

    def get(self, key: str) -> Optional[NutrientProfile]:
        return self._entries.get(key)

    def put(self, key: str, value: NutrientProfile) -> None:
        self._entries[key] = value

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class LRUNutritionCache:
    """Bounded cache that drops the least recently used entry."""

    def __init__(self, max_entries: int = CACHE_SIZE):
        self.max_entries = max(1, max_entries)
        self._entries: "OrderedDict[str, NutrientProfile]" = OrderedDict()

    def get(self, key: str) -> Optional[NutrientProfile]:
        value = self._entries.get(key)
        if value is not None:
            self._entries.move_to_end(key)
        return value

    def put(self, key: str, value: NutrientProfile) -> None:
        self._entries[key] = value
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)

    def __len__(self) -> int:
        return len(self._entries)


class JsonNutritionCache:
    """
    Reads and writes cached profiles to a JSON file.

    Every put rewrites the whole file, so this backend suits a single process
    with a modest number of entries. Inside a running event loop the write
    happens on the default executor; outside one it happens inline.
    """

    def __init__(self, filepath: str = CACHE_FILE):
        self.filepath = filepath
        self._entries = self._load()
        self._lock = threading.Lock()
        self._version = 0
        self._written_version = 0

    def _load(self) -> Dict[str, NutrientProfile]:
        if not os.path.exists(self.filepath):
            return {}
        try:
            with open(self.filepath, "r") as f:
                raw = json.load(f)
            return {key: NutrientProfile.model_validate(value) for key, value in raw.items()}
        except Exception as e:
            print(f"⚠️ Nutrition cache load failed, starting empty: {e}")
            return {}

    def _snapshot(self) -> Dict[str, Dict[str, Any]]:
        return {key: value.model_dump() for key, value in self._entries.items()}

    def _write(self, snapshot: Dict[str, Dict[str, Any]], version: int):
        with self._lock:
            # An older snapshot finishing after a newer one must not overwrite it
            if version < self._written_version:
                return
            try:
                os.makedirs(os.path.dirname(self.filepath) or ".", exist_ok=True)
                tmp_path = self.filepath + ".tmp"
                with open(tmp_path, "w") as f:
                    json.dump(snapshot, f, indent=2)
                os.replace(tmp_path, self.filepath)
                self._written_version = version
            except Exception as e:
                print(f"⚠️ Nutrition cache save failed: {e}")

    def get(self, key: str) -> Optional[NutrientProfile]:
        return self._entries.get(key)

    def put(self, key: str, value: NutrientProfile) -> None:
        self._entries[key] = value
        self._version += 1
        snapshot, version = self._snapshot(), self._version

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._write(snapshot, version)
            return
        loop.run_in_executor(None, self._write, snapshot, version)

    def __len__(self) -> int:
        return len(self._entries)


def create_cache(backend: str = CACHE_BACKEND) -> NutritionCache:
    """Build the cache selected by NUTRITION_CACHE_BACKEND."""
    if backend == "json":
        print(f"💾 Nutrition cache: {CACHE_FILE}")
        return JsonNutritionCache(CACHE_FILE)
    if backend == "lru":
        return LRUNutritionCache(CACHE_SIZE)
    if backend != "memory":
        print(f"⚠️ Unknown cache backend '{backend}', using memory")
    return InMemoryNutritionCache()


# =============================================================================
# EXPORTS
# =============================================================================
__all__ = [
    "build_cache_key",
    "NutritionCache",
    "InMemoryNutritionCache",
    "LRUNutritionCache",
    "JsonNutritionCache",
    "create_cache",
    "CACHE_BACKEND",
]
