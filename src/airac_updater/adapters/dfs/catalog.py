"""Resolve catalog entries to download locations."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from airac_updater.common.errors import DatasetNotFoundError
from airac_updater.domain.ports import DatasetRequest

from .schema import CatalogLeaf

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .schema import AmendmentCatalog

log = getLogger(__name__)


def resolve_dataset_url(
    catalog: AmendmentCatalog,
    *,
    amendment_id: int,
    dataset_name: str,
    release_type: str,
    base_url: str,
) -> str | None:
    """URL of ``dataset_name`` in the given release type, or ``None`` when absent.

    Every amendment carrying ``amendment_id`` is searched in catalog order;
    within one amendment the first leaf named ``dataset_name`` decides.
    """

    for amendment in catalog.amendments:
        if amendment.amendment_id != amendment_id:
            continue
        leaf = amendment.find(
            lambda node: isinstance(node, CatalogLeaf) and node.name == dataset_name
        )
        if not isinstance(leaf, CatalogLeaf):
            continue
        release = leaf.release(release_type)
        if release is not None:
            return f"{base_url.rstrip('/')}/{amendment_id}/{release.filename.lstrip('/')}"
    return None


def build_dataset_requests(
    catalog: AmendmentCatalog,
    dataset_names: Iterable[str],
    *,
    amendment_id: int,
    release_type: str,
    base_url: str,
) -> list[DatasetRequest]:
    """Resolve every dataset; a missing one aborts with :class:`DatasetNotFoundError`."""

    requests: list[DatasetRequest] = []
    for name in dataset_names:
        url = resolve_dataset_url(
            catalog,
            amendment_id=amendment_id,
            dataset_name=name,
            release_type=release_type,
            base_url=base_url,
        )
        if url is None:
            raise DatasetNotFoundError(name)
        log.debug("Resolved dataset %s to %s", name, url)
        requests.append(DatasetRequest(name=name, location=url))
    return requests
