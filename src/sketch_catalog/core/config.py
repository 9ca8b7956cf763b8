"""Catalog configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass

OPENPROCESSING_API_BASE = "https://openprocessing.org/api/"

# Editorial pin list for the 2025 curation, in display order.
PRIORITY_IDS: tuple[str, ...] = (
    "2690038",
    "2484739",
    "2688829",
    "2689119",
    "2690571",
    "2690405",
    "2684408",
    "2693274",
    "2693345",
    "2691712",
)


@dataclass(frozen=True)
class CatalogConfig:
    """Immutable catalog configuration.

    ``timeout`` is passed straight to ``httpx``; ``None`` disables it.
    """

    api_base: str = OPENPROCESSING_API_BASE
    old_curation_id: str = "87649"   # 2024
    new_curation_id: str = "89576"   # 2025
    priority_ids: tuple[str, ...] = PRIORITY_IDS
    sample_cap_multiplier: int = 10
    timeout: float | None = None
