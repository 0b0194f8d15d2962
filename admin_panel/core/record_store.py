from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from .exceptions import NotFoundError, StaleOverwriteError
from .product import ID_BASE, Product, make_product_id

logger = logging.getLogger(__name__)

ChangeListener = Callable[["RecordStore", str], None]


@dataclass(frozen=True)
class RefreshTicket:
    """
    Captured when a refresh starts.

    - version: store version at the time the refresh was requested
    - generation: refresh sequence number; only the newest refresh may land
    """
    version: int
    generation: int

    def to_dict(self) -> Dict[str, int]:
        return {"version": self.version, "generation": self.generation}

    @classmethod
    def from_dict(cls, data: Any) -> Optional[RefreshTicket]:
        if not isinstance(data, dict):
            return None
        try:
            return cls(version=int(data["version"]), generation=int(data["generation"]))
        except (KeyError, TypeError, ValueError):
            return None


class RecordStore:
    """
    Authoritative, ordered, in-memory list of products for one UI session.

    Invariants:
    - every stored product has an id, and ids are unique
    - ids are never changed after insert
    - `version` increases by one on every mutation

    Listeners registered with `add_listener` are called after each mutation
    with the store and the name of the operation. This is the single
    notify-on-change channel used to recompute the derived view.
    """

    def __init__(self, records: Iterable[Product] = (), *, version: int = 0, refresh_generation: int = 0):
        self._records: List[Product] = []
        self.version = version
        self.refresh_generation = refresh_generation
        self._listeners: List[ChangeListener] = []
        self._load(records)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._records)

    def __contains__(self, record_id: object) -> bool:
        return any(r.id == record_id for r in self._records)

    @property
    def records(self) -> List[Product]:
        """Snapshot copy; mutating it does not affect the store."""
        return list(self._records)

    def ids(self) -> List[str]:
        return [r.id for r in self._records]

    def get(self, record_id: str) -> Product:
        for r in self._records:
            if r.id == record_id:
                return r
        raise NotFoundError(record_id, kind="Product")

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------
    def add_listener(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener; returns a function that removes it."""
        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _remove

    def _changed(self, operation: str) -> None:
        self.version += 1
        logger.debug("store_changed", extra={"operation": operation, "version": self.version})
        for listener in list(self._listeners):
            listener(self, operation)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def next_id(self) -> str:
        """
        Next sequential id: PRD-<1000 + len(store)>, bumped past any id
        already taken (deletes can make the plain formula collide).
        """
        taken = set(self.ids())
        n = ID_BASE + len(self._records)
        while make_product_id(n) in taken:
            n += 1
        return make_product_id(n)

    def insert(self, record: Product) -> Product:
        """
        Add a validated product at the front of the sequence (newest first).

        Assigns an id when the product has none. An explicit id that is
        already taken raises ValueError.
        """
        if record.id is None:
            record = dataclasses.replace(record, id=self.next_id())
        elif record.id in self:
            raise ValueError(f"Duplicate product id '{record.id}'")

        self._records.insert(0, record)
        self._changed("insert")
        logger.info("Product inserted", extra={"record_id": record.id, "version": self.version})
        return record

    def update_by_id(self, record_id: str, record: Product) -> Product:
        """
        Replace the product with `record_id`, keeping the original id.

        Raises:
            NotFoundError: if no product has that id
        """
        for idx, existing in enumerate(self._records):
            if existing.id == record_id:
                updated = dataclasses.replace(record, id=existing.id)
                self._records[idx] = updated
                self._changed("update")
                logger.info("Product updated", extra={"record_id": record_id, "version": self.version})
                return updated
        raise NotFoundError(record_id, kind="Product")

    def delete_by_id(self, record_id: str) -> int:
        return self.delete_by_ids([record_id])

    def delete_by_ids(self, record_ids: Iterable[str]) -> int:
        """Remove every product whose id is in `record_ids`. Missing ids are ignored."""
        doomed = set(record_ids)
        before = len(self._records)
        self._records = [r for r in self._records if r.id not in doomed]
        removed = before - len(self._records)
        if removed:
            self._changed("delete")
            logger.info("Products deleted", extra={"n_deleted": removed, "version": self.version})
        return removed

    def begin_refresh(self) -> RefreshTicket:
        """Start a refresh; any refresh started earlier is superseded."""
        self.refresh_generation += 1
        return RefreshTicket(version=self.version, generation=self.refresh_generation)

    def replace_all(self, records: Iterable[Product], ticket: Optional[RefreshTicket] = None) -> None:
        """
        Swap the whole sequence in one step.

        With a ticket, the swap only happens if nothing changed since the
        ticket was issued and no newer refresh was started.

        Raises:
            StaleOverwriteError: if the ticket is out of date; the store is left as is
            ValueError: if the new records contain duplicate ids
        """
        if ticket is not None:
            if ticket.generation != self.refresh_generation:
                raise StaleOverwriteError(
                    f"Refresh {ticket.generation} superseded by refresh {self.refresh_generation}"
                )
            if ticket.version != self.version:
                raise StaleOverwriteError(
                    f"Store changed during refresh (version {ticket.version} -> {self.version})"
                )

        new_store = RecordStore(records)
        self._records = new_store._records
        self._changed("replace_all")

    def _load(self, records: Iterable[Product]) -> None:
        seen = set()
        for r in records:
            if r.id is None:
                r = dataclasses.replace(r, id=self.next_id())
            if r.id in seen:
                raise ValueError(f"Duplicate product id '{r.id}'")
            seen.add(r.id)
            self._records.append(r)

    # ------------------------------------------------------------------
    # (De)serialisation for dcc.Store payloads
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "refresh_generation": self.refresh_generation,
            "records": [r.to_dict() for r in self._records],
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> RecordStore:
        if not data:
            return cls()
        return cls(
            (Product.from_dict(r) for r in data.get("records", [])),
            version=int(data.get("version", 0)),
            refresh_generation=int(data.get("refresh_generation", 0)),
        )
