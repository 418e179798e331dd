"""
Ledger: the single state owner for groups, members and collections.

Construct one per process or UI session. Mutations update the in-memory store
and are mirrored to the storage substrate by the persistence bridge; queries
are recomputed from the current records on every call.
"""
import logging
from typing import List, Optional

from core import summaries
from core.allocation import allocate_payment
from data_manager.persistence import PersistenceBridge
from data_manager.record_store import RecordStore
from data_manager.schema import (
    Group, Member, Collection,
    MemberSummary, GroupSummary, OverallSummary, WeeklyData,
)
from data_manager.snapshot import SnapshotParseError, export_snapshot, import_snapshot
from data_manager.storage import KeyValueStore, MemoryStore

logger = logging.getLogger(__name__)


class MicrofinanceLedger:
    def __init__(self, store: RecordStore):
        self.store = store

    @classmethod
    def open(cls, substrate: KeyValueStore) -> "MicrofinanceLedger":
        """Load saved state (or sample data) and persist every later change"""
        return cls(PersistenceBridge(substrate).load_initial_state())

    @classmethod
    def in_memory(cls, seed_sample_data: bool = True) -> "MicrofinanceLedger":
        if seed_sample_data:
            return cls.open(MemoryStore())
        return cls(RecordStore())

    # ---- Records ----

    @property
    def groups(self) -> List[Group]:
        return self.store.groups

    @property
    def members(self) -> List[Member]:
        return self.store.members

    @property
    def collections(self) -> List[Collection]:
        return self.store.collections

    def add_group(self, fields: dict) -> Group:
        return self.store.add_group(fields)

    def update_group(self, record_id: str, fields: dict):
        self.store.update_group(record_id, fields)

    def delete_group(self, record_id: str):
        self.store.delete_group(record_id)

    def add_member(self, fields: dict) -> Member:
        return self.store.add_member(fields)

    def update_member(self, record_id: str, fields: dict):
        self.store.update_member(record_id, fields)

    def delete_member(self, record_id: str):
        self.store.delete_member(record_id)

    def add_collection(self, fields: dict) -> Optional[Collection]:
        """Record a payment, allocating it by the member's loan terms.

        Caller-supplied principal/interest are ignored. A payment for an
        unknown member is not recorded and None is returned.
        """
        values = Collection.normalize_fields(fields)
        values.pop("principal_paid", None)
        values.pop("interest_paid", None)

        member = self.store.find_member(values.get("member_id", ""))
        if member is None:
            logger.info("Collection for unknown member %r not recorded", values.get("member_id"))
            return None

        principal_paid, interest_paid = allocate_payment(
            member.loan_amount, member.total_interest, values.get("amount_paid", 0.0),
        )
        values["principal_paid"] = principal_paid
        values["interest_paid"] = interest_paid
        return self.store.append_collection(values)

    def update_collection(self, record_id: str, fields: dict):
        """Direct merge; the stored allocation is not recomputed"""
        self.store.update_collection(record_id, fields)

    def delete_collection(self, record_id: str):
        self.store.delete_collection(record_id)

    def clear_all_data(self):
        self.store.clear_all()

    # ---- Summaries ----

    def get_member_summary(self, member_id: str) -> Optional[MemberSummary]:
        return summaries.member_summary(self.store, member_id)

    def get_all_member_summaries(self) -> List[MemberSummary]:
        return summaries.all_member_summaries(self.store)

    def get_group_summary(self, group_no: str) -> Optional[GroupSummary]:
        return summaries.group_summary(self.store, group_no)

    def get_all_group_summaries(self) -> List[GroupSummary]:
        return summaries.all_group_summaries(self.store)

    def get_overall_summary(self) -> OverallSummary:
        return summaries.overall_summary(self.store)

    def get_weekly_data(self) -> List[WeeklyData]:
        return summaries.weekly_data(self.store)

    def get_collections_for_week(self, week_no: int) -> List[Collection]:
        return summaries.collections_for_week(self.store, week_no)

    def get_expected_collections_for_week(self, week_no: int) -> List[MemberSummary]:
        return summaries.expected_collections_for_week(self.store, week_no)

    # ---- Snapshot ----

    def export_json(self) -> str:
        return export_snapshot(self.store)

    def import_json(self, text: str) -> bool:
        """Returns False (and changes nothing) when the text cannot be parsed"""
        try:
            kinds = import_snapshot(self.store, text)
        except SnapshotParseError as e:
            logger.error("Failed to import data: %s", e)
            return False
        logger.info("Imported %s", ", ".join(k.value for k in kinds) or "nothing")
        return True
