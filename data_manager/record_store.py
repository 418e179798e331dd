"""In-memory holder of groups, members and collections"""
import logging
from dataclasses import replace
from typing import Callable, Dict, List, Optional

from config.constants import RecordKind
from data_manager.schema import Group, Member, Collection, Record
from utils.id_generator import generate_group_id, generate_member_id, generate_collection_id

logger = logging.getLogger(__name__)

ChangeListener = Callable[[RecordKind], None]

RECORD_TYPES = {
    RecordKind.GROUPS: Group,
    RecordKind.MEMBERS: Member,
    RecordKind.COLLECTIONS: Collection,
}

_ID_GENERATORS = {
    RecordKind.GROUPS: generate_group_id,
    RecordKind.MEMBERS: generate_member_id,
    RecordKind.COLLECTIONS: generate_collection_id,
}


class RecordStore:
    """Owns the three record lists and notifies listeners after every change.

    Updates and deletes with an unknown id are silent no-ops.
    """

    def __init__(
        self,
        groups: Optional[List[Group]] = None,
        members: Optional[List[Member]] = None,
        collections: Optional[List[Collection]] = None,
    ):
        self._records: Dict[RecordKind, list] = {
            RecordKind.GROUPS: list(groups or []),
            RecordKind.MEMBERS: list(members or []),
            RecordKind.COLLECTIONS: list(collections or []),
        }
        self._listeners: List[ChangeListener] = []

    # ---- Access ----

    @property
    def groups(self) -> List[Group]:
        return self._records[RecordKind.GROUPS]

    @property
    def members(self) -> List[Member]:
        return self._records[RecordKind.MEMBERS]

    @property
    def collections(self) -> List[Collection]:
        return self._records[RecordKind.COLLECTIONS]

    def records(self, kind: RecordKind) -> list:
        return self._records[RecordKind(kind)]

    def find_member(self, member_id: str) -> Optional[Member]:
        """First member with the given display key"""
        return next((m for m in self.members if m.member_id == member_id), None)

    def find_group(self, group_no: str) -> Optional[Group]:
        return next((g for g in self.groups if g.group_no == group_no), None)

    # ---- Notifications ----

    def subscribe(self, listener: ChangeListener):
        self._listeners.append(listener)

    def _notify(self, kind: RecordKind):
        for listener in self._listeners:
            listener(kind)

    # ---- Generic CRUD ----

    def add(self, kind: RecordKind, fields: dict) -> Record:
        kind = RecordKind(kind)
        values = RECORD_TYPES[kind].normalize_fields(fields)
        values["id"] = _ID_GENERATORS[kind]()
        record = RECORD_TYPES[kind](**values)
        self._records[kind].append(record)
        logger.debug("Added %s record %s", kind.value, record.id)
        self._notify(kind)
        return record

    def update(self, kind: RecordKind, record_id: str, fields: dict):
        """Merge only the supplied fields into the record with this id"""
        kind = RecordKind(kind)
        changes = RECORD_TYPES[kind].normalize_fields(fields)
        changes.pop("id", None)
        records = self._records[kind]
        for i, record in enumerate(records):
            if record.id == record_id:
                records[i] = replace(record, **changes)
                self._notify(kind)
                return
        logger.debug("Update of unknown %s record %s ignored", kind.value, record_id)

    def delete(self, kind: RecordKind, record_id: str):
        kind = RecordKind(kind)
        records = self._records[kind]
        remaining = [r for r in records if r.id != record_id]
        if len(remaining) == len(records):
            logger.debug("Delete of unknown %s record %s ignored", kind.value, record_id)
            return
        self._records[kind] = remaining
        self._notify(kind)

    def replace(self, kind: RecordKind, records: list):
        """Swap a whole collection, e.g. on snapshot import"""
        kind = RecordKind(kind)
        self._records[kind] = list(records)
        self._notify(kind)

    def clear_all(self):
        for kind in RecordKind:
            self.replace(kind, [])

    # ---- Typed helpers ----

    def add_group(self, fields: dict) -> Group:
        return self.add(RecordKind.GROUPS, fields)

    def update_group(self, record_id: str, fields: dict):
        self.update(RecordKind.GROUPS, record_id, fields)

    def delete_group(self, record_id: str):
        self.delete(RecordKind.GROUPS, record_id)

    def add_member(self, fields: dict) -> Member:
        return self.add(RecordKind.MEMBERS, fields)

    def update_member(self, record_id: str, fields: dict):
        self.update(RecordKind.MEMBERS, record_id, fields)

    def delete_member(self, record_id: str):
        self.delete(RecordKind.MEMBERS, record_id)

    def append_collection(self, fields: dict) -> Collection:
        """Store a collection whose allocation is already computed"""
        return self.add(RecordKind.COLLECTIONS, fields)

    def update_collection(self, record_id: str, fields: dict):
        self.update(RecordKind.COLLECTIONS, record_id, fields)

    def delete_collection(self, record_id: str):
        self.delete(RecordKind.COLLECTIONS, record_id)
