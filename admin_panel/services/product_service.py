from __future__ import annotations

import dataclasses
import logging
import random
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional

import pandas as pd

from admin_panel.core.exceptions import StaleOverwriteError
from admin_panel.core.product import PRODUCT_FIELDS, Product, generate_products
from admin_panel.core.query_state import QueryState
from admin_panel.core.query_view import derive_view, reconcile
from admin_panel.core.record_store import RecordStore, RefreshTicket
from admin_panel.services.notifications import Notifier
from admin_panel.validation.errors import ValidationError
from admin_panel.validation.product_validation import validate_product

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_SIZE = 45


@dataclass
class SubmitOutcome:
    """
    Result of a form submission.

    - record: the stored product (None on failure)
    - errors: field -> message when validation failed
    - created: True for an insert, False for an update
    """
    record: Optional[Product] = None
    errors: Dict[str, str] = field(default_factory=dict)
    created: bool = False

    @property
    def ok(self) -> bool:
        return self.record is not None


class ProductService:
    """
    Coordinates the data table: Mutation Gateway -> Record Store -> selection
    bookkeeping, and reports every mutation to the notifier.

    The service holds no session state itself; each call receives the
    session's store and query state, so one instance can serve any session.
    """

    def __init__(
            self,
            notifier: Optional[Notifier] = None,
            *,
            sample_size: int = DEFAULT_SAMPLE_SIZE,
            rng: Optional[random.Random] = None,
    ):
        self.notifier = notifier or Notifier()
        self.sample_size = sample_size
        self.rng = rng or random.Random()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def sample_records(self) -> List[Product]:
        return generate_products(self.sample_size, self.rng)

    def load(self) -> RecordStore:
        store = RecordStore(self.sample_records())
        logger.info("Loaded sample products", extra={"n_products": len(store)})
        return store

    # ------------------------------------------------------------------
    # Create / update
    # ------------------------------------------------------------------
    def submit(
            self,
            store: RecordStore,
            values: Mapping[str, Any],
            *,
            editing_id: Optional[str] = None,
    ) -> SubmitOutcome:
        """
        Validate form values and insert (no `editing_id`) or update.

        Validation failures come back as field errors with the store
        unchanged. Updating a product that has since been deleted raises
        NotFoundError.
        """
        try:
            record = validate_product(values).raise_for_errors()
        except ValidationError as e:
            logger.info("Product rejected by validation", extra={"fields": sorted(e.field_errors)})
            return SubmitOutcome(errors=e.field_errors)

        if editing_id is not None:
            stored = store.update_by_id(editing_id, record)
            self.notifier.success(f"Product {stored.name} has been updated.")
            return SubmitOutcome(record=stored, created=False)

        # New products always get a store-assigned id
        stored = store.insert(dataclasses.replace(record, id=None))
        self.notifier.success(f"Product {stored.name} has been added.")
        return SubmitOutcome(record=stored, created=True)

    # ------------------------------------------------------------------
    # Keeping the query state in step with the store
    # ------------------------------------------------------------------
    @contextmanager
    def tracking(self, store: RecordStore, state: QueryState) -> Iterator[None]:
        """
        Reconcile `state` with `store` after every mutation made inside the
        block (selection pruned, page clamped).
        """
        def _on_change(changed: RecordStore, operation: str) -> None:
            reconcile(changed, state)

        remove = store.add_listener(_on_change)
        try:
            yield
        finally:
            remove()

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------
    def delete(self, store: RecordStore, state: QueryState, record_id: str) -> Product:
        """
        Raises:
            NotFoundError: if the product is already gone
        """
        record = store.get(record_id)
        with self.tracking(store, state):
            store.delete_by_id(record_id)
        self.notifier.success(f"Product {record.name} has been deleted.")
        return record

    def bulk_delete(self, store: RecordStore, state: QueryState) -> int:
        if not state.selected_ids:
            return 0
        n_selected = len(state.selected_ids)
        with self.tracking(store, state):
            n = store.delete_by_ids(state.selected_ids)
        self.notifier.success(f"{n_selected} products have been deleted.")
        return n

    # ------------------------------------------------------------------
    # Refresh
    # ------------------------------------------------------------------
    def begin_refresh(self, store: RecordStore, state: QueryState) -> RefreshTicket:
        state.reset()
        return store.begin_refresh()

    def complete_refresh(
            self,
            store: RecordStore,
            state: QueryState,
            ticket: RefreshTicket,
            records: Optional[List[Product]] = None,
    ) -> bool:
        """
        Land a refresh started with `begin_refresh`.

        Returns False, leaving the store untouched, if the store was mutated
        or another refresh was started in the meantime.
        """
        records = self.sample_records() if records is None else records
        try:
            with self.tracking(store, state):
                store.replace_all(records, ticket=ticket)
        except StaleOverwriteError as e:
            logger.warning("Discarding stale refresh: %s", e)
            self.notifier.warning("Refresh discarded: data changed while loading.")
            return False

        self.notifier.success("Data refreshed successfully!")
        return True

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    def to_frame(self, store: RecordStore, state: QueryState) -> pd.DataFrame:
        """Filtered and sorted view (all pages) as a DataFrame."""
        view = derive_view(store, state)
        return pd.DataFrame(
            [r.to_dict() for r in view.sorted],
            columns=list(PRODUCT_FIELDS),
        )

    def export_csv(self, store: RecordStore, state: QueryState) -> str:
        return self.to_frame(store, state).to_csv(index=False)
