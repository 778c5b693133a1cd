"""Search hits and the collection returned by one catalog search."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Protocol

from iecbib.resolution.pool import WorkerPool

if TYPE_CHECKING:
    from iecbib.core.models import BibliographicItem


class DetailSource(Protocol):
    """Anything that can turn a hit into a full bibliographic item."""

    async def fetch(self, hit: Hit) -> BibliographicItem: ...


class Hit:
    """A search result row (code, title, url) whose full record is fetched lazily."""

    def __init__(
        self,
        code: str,
        title: str,
        url: str,
        collection: HitCollection | None = None,
    ) -> None:
        self.code = code
        self.title = title
        self.url = url
        self.collection = collection
        self._fetched_item: BibliographicItem | None = None

    @property
    def fetched_item(self) -> BibliographicItem | None:
        """The fetched record, or None if not fetched yet."""
        return self._fetched_item

    @property
    def part(self) -> str | None:
        """Everything after the first dash of the code (``IEC 60050-311:2002`` -> ``311``)."""
        match = re.search(r"(?<=-)[\w-]+", self.code)
        return match.group() if match else None

    async def fetch(self) -> BibliographicItem:
        """Fetch the full record once; later calls return the cached item."""
        if self._fetched_item is None:
            if self.collection is None or self.collection.source is None:
                raise RuntimeError(f"Hit {self.code!r} has no detail source to fetch from")
            self._fetched_item = await self.collection.source.fetch(self)
        return self._fetched_item

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code, "title": self.title, "url": self.url}

    def __repr__(self) -> str:
        return f"Hit(code={self.code!r}, fetched={self._fetched_item is not None})"


class HitCollection:
    """
    Ordered hits from one catalog search.

    Keeps the query that produced it (``text``, ``year``, ``part``) and a
    ``fetched`` flag that turns true once every hit has been fetched.
    """

    DEFAULT_WORKERS = 4

    def __init__(
        self,
        text: str,
        year: str | None = None,
        part: str | None = None,
        *,
        source: DetailSource | None = None,
    ) -> None:
        self.text = text
        self.year = year
        self.part = part
        self.source = source
        self.fetched = False
        self._hits: list[Hit] = []

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[dict[str, str]],
        text: str,
        year: str | None = None,
        part: str | None = None,
        *,
        source: DetailSource | None = None,
    ) -> HitCollection:
        """Build a collection from raw ``{code, title, url}`` rows."""
        collection = cls(text, year, part, source=source)
        for row in rows:
            collection.add(row["code"], row["title"], row["url"])
        return collection

    def add(self, code: str, title: str, url: str) -> Hit:
        """Append a hit owned by this collection."""
        hit = Hit(code, title, url, collection=self)
        self._hits.append(hit)
        return hit

    async def fetch(self, workers: int = DEFAULT_WORKERS) -> HitCollection:
        """Fetch every hit's full record through a pool of ``workers``."""
        pool: WorkerPool[Hit, BibliographicItem] = WorkerPool(workers)
        pool.register(Hit.fetch)
        for hit in self._hits:
            await pool.submit(hit)
        await pool.await_all()
        self.fetched = True
        return self

    def __iter__(self) -> Iterator[Hit]:
        return iter(self._hits)

    def __len__(self) -> int:
        return len(self._hits)

    def __getitem__(self, index: int) -> Hit:
        return self._hits[index]

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__}:{id(self):#016x} text={self.text!r} "
            f"year={self.year!r} hits={len(self._hits)} fetched={self.fetched}>"
        )
