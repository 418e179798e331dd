"""Full-state JSON export and import"""
import json
from typing import Dict, List

from config.constants import RecordKind
from data_manager.record_store import RecordStore, RECORD_TYPES


class SnapshotParseError(ValueError):
    """Snapshot text could not be turned into records"""


def serialize_records(records: list) -> str:
    """JSON array of records, as stored under a storage key"""
    return json.dumps([r.to_dict() for r in records], ensure_ascii=False)


def parse_records(kind: RecordKind, data) -> list:
    """Convert a decoded JSON array into records of the given kind"""
    kind = RecordKind(kind)
    if not isinstance(data, list):
        raise SnapshotParseError(f"'{kind.value}' must be a list, got {type(data).__name__}")
    record_type = RECORD_TYPES[kind]
    records = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise SnapshotParseError(f"{kind.value}[{i}] must be an object")
        try:
            records.append(record_type.from_dict(item))
        except (TypeError, ValueError, OverflowError) as e:
            raise SnapshotParseError(f"{kind.value}[{i}]: {e}") from e
    return records


def export_snapshot(store: RecordStore) -> str:
    data = {kind.value: [r.to_dict() for r in store.records(kind)] for kind in RecordKind}
    return json.dumps(data, indent=2, ensure_ascii=False)


def parse_snapshot(text: str) -> Dict[RecordKind, List]:
    """Parse a snapshot; only the collections present in it are returned"""
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise SnapshotParseError(f"Invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise SnapshotParseError("Snapshot must be a JSON object")

    return {
        kind: parse_records(kind, data[kind.value])
        for kind in RecordKind
        if data.get(kind.value) is not None
    }


def import_snapshot(store: RecordStore, text: str) -> List[RecordKind]:
    """Replace each collection present in the snapshot; returns the replaced kinds.

    Raises SnapshotParseError before touching the store if anything fails to parse.
    """
    parsed = parse_snapshot(text)
    for kind, records in parsed.items():
        store.replace(kind, records)
    return list(parsed)
