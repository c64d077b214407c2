"""Pydantic models describing the DFS dataset catalog payload.

The catalog lists amendment cycles; each carries a tree of groups and leaf
datasets, and every leaf lists the releases (one per encoding) that can be
downloaded for it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class DfsBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class CatalogRelease(DfsBaseModel):
    release_type: str = Field(alias="type")
    filename: str


class CatalogLeaf(DfsBaseModel):
    type: Literal["leaf"] = "leaf"
    name: str
    releases: tuple[CatalogRelease, ...] = ()

    def find(self, predicate: NodePredicate) -> CatalogNode | None:
        return self if predicate(self) else None

    def release(self, release_type: str) -> CatalogRelease | None:
        """First release of the given type, if any."""

        for release in self.releases:
            if release.release_type == release_type:
                return release
        return None


class CatalogGroup(DfsBaseModel):
    type: Literal["group"] = "group"
    name: str
    items: tuple[CatalogNode, ...] = ()

    def find(self, predicate: NodePredicate) -> CatalogNode | None:
        """Depth-first, pre-order search; the first match in tree order wins."""

        if predicate(self):
            return self
        for item in self.items:
            found = item.find(predicate)
            if found is not None:
                return found
        return None


CatalogNode = Annotated[CatalogGroup | CatalogLeaf, Field(discriminator="type")]
NodePredicate = Callable[[CatalogGroup | CatalogLeaf], bool]


class AmendmentMetadata(DfsBaseModel):
    datasets: tuple[CatalogNode, ...] = ()


class Amendment(DfsBaseModel):
    amendment_id: int = Field(alias="Amdt")
    metadata: AmendmentMetadata = Field(alias="Metadata")

    def find(self, predicate: NodePredicate) -> CatalogNode | None:
        for dataset in self.metadata.datasets:
            found = dataset.find(predicate)
            if found is not None:
                return found
        return None


class AmendmentCatalog(DfsBaseModel):
    amendments: tuple[Amendment, ...] = Field(alias="Amdts")


CatalogGroup.model_rebuild()
AmendmentMetadata.model_rebuild()
