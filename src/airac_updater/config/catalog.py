"""DFS dataset catalog configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import env_int, env_list, env_str
from .errors import ConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy

DFS_CATALOG_URL = "https://aip.dfs.de/datasets/rest/"
DEFAULT_AMENDMENT_ID = 0
DEFAULT_RELEASE_TYPE = "AIXM 5.1"
DEFAULT_DATASETS = (
    "ED AirportHeliport",
    "ED Navaids",
    "ED Routes",
    "ED Runway",
    "ED Waypoints",
)
USER_AGENT = "airac-updater (+https://aip.dfs.de/datasets/)"


def default_resilience(*, cache: CacheConfig | None = None) -> ResilienceConfig:
    return ResilienceConfig(
        name="dfs",
        timeout_seconds=120.0,
        retry=RetryPolicy(total=3),
        ratelimit=RateLimit(max_calls=8, per_seconds=1.0),
        cache=cache or CacheConfig(backend="memory"),
        default_headers={"User-Agent": USER_AGENT},
    )


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Where to find the catalog and which datasets of which amendment to pull."""

    catalog_url: str = DFS_CATALOG_URL
    amendment_id: int = DEFAULT_AMENDMENT_ID
    release_type: str = DEFAULT_RELEASE_TYPE
    datasets: tuple[str, ...] = DEFAULT_DATASETS
    resilience: ResilienceConfig = field(default_factory=default_resilience)

    @property
    def base_url(self) -> str:
        """Catalog URL without trailing slash; dataset URLs are built below it."""

        return self.catalog_url.rstrip("/")


def get_catalog_config() -> CatalogConfig:
    amendment_id = env_int("AIRAC_UPDATER_AMENDMENT", DEFAULT_AMENDMENT_ID)
    if amendment_id < 0:
        raise ConfigurationError("AIRAC_UPDATER_AMENDMENT must not be negative")

    cache_backend = env_str("AIRAC_UPDATER_HTTP_CACHE", "memory")
    if cache_backend not in {"memory", "sqlite", "off"}:
        raise ConfigurationError(
            f"AIRAC_UPDATER_HTTP_CACHE must be memory, sqlite or off, got {cache_backend!r}"
        )
    cache = (
        CacheConfig(enabled=False)
        if cache_backend == "off"
        else CacheConfig(backend="sqlite" if cache_backend == "sqlite" else "memory")
    )

    return CatalogConfig(
        catalog_url=env_str("AIRAC_UPDATER_CATALOG_URL", DFS_CATALOG_URL),
        amendment_id=amendment_id,
        release_type=env_str("AIRAC_UPDATER_RELEASE_TYPE", DEFAULT_RELEASE_TYPE),
        datasets=env_list("AIRAC_UPDATER_DATASETS", DEFAULT_DATASETS),
        resilience=default_resilience(cache=cache),
    )
