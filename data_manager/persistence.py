"""Mirrors the record store into a durable key-value store"""
import json
import logging
from typing import Dict

from config.constants import RecordKind
from config.settings import STORAGE_KEY_GROUPS, STORAGE_KEY_MEMBERS, STORAGE_KEY_COLLECTIONS
from data_manager.record_store import RecordStore
from data_manager.sample_data import sample_groups, sample_members, sample_collections
from data_manager.snapshot import parse_records, serialize_records
from data_manager.storage import KeyValueStore

logger = logging.getLogger(__name__)

STORAGE_KEYS: Dict[RecordKind, str] = {
    RecordKind.GROUPS: STORAGE_KEY_GROUPS,
    RecordKind.MEMBERS: STORAGE_KEY_MEMBERS,
    RecordKind.COLLECTIONS: STORAGE_KEY_COLLECTIONS,
}

SAMPLE_DATA = {
    RecordKind.GROUPS: sample_groups,
    RecordKind.MEMBERS: sample_members,
    RecordKind.COLLECTIONS: sample_collections,
}


class PersistenceBridge:
    """Loads the three collections at startup and writes each one back when it changes.

    Write failures are logged and never reach the caller of the mutation.
    """

    def __init__(self, substrate: KeyValueStore):
        self.substrate = substrate

    def _load(self, kind: RecordKind) -> list:
        key = STORAGE_KEYS[kind]
        try:
            text = self.substrate.get(key)
        except Exception:
            logger.exception("Could not read %s, using sample data", key)
            return SAMPLE_DATA[kind]()

        if text is None:
            logger.info("No saved %s, using sample data", kind.value)
            return SAMPLE_DATA[kind]()
        try:
            return parse_records(kind, json.loads(text))
        except ValueError as e:
            logger.error("Saved %s unreadable (%s), using sample data", kind.value, e)
            return SAMPLE_DATA[kind]()

    def load_initial_state(self) -> RecordStore:
        """Build a store from saved data and start mirroring its changes"""
        store = RecordStore(
            groups=self._load(RecordKind.GROUPS),
            members=self._load(RecordKind.MEMBERS),
            collections=self._load(RecordKind.COLLECTIONS),
        )
        self.attach(store)
        return store

    def attach(self, store: RecordStore):
        store.subscribe(lambda kind: self.save(store, kind))

    def save(self, store: RecordStore, kind: RecordKind):
        key = STORAGE_KEYS[kind]
        try:
            self.substrate.set(key, serialize_records(store.records(kind)))
        except Exception:
            logger.exception("Failed to persist %s", key)
