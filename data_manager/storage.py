"""
Durable key-value text stores.

The ledger writes each collection as a JSON array under its own key.
ExcelStore keeps every key as a worksheet of the workbook (one row per record)
and backs the file up before each write.
"""
import json
import logging
import shutil
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

import pandas as pd
from openpyxl import load_workbook

from config.constants import GROUP_FIELDS, MEMBER_FIELDS, COLLECTION_FIELDS
from config.settings import (
    EXCEL_FILE, BACKUP_KEEP,
    STORAGE_KEY_GROUPS, STORAGE_KEY_MEMBERS, STORAGE_KEY_COLLECTIONS,
)

logger = logging.getLogger(__name__)

SHEET_INFO = "info"

SHEET_COLUMNS = {
    STORAGE_KEY_GROUPS: GROUP_FIELDS,
    STORAGE_KEY_MEMBERS: MEMBER_FIELDS,
    STORAGE_KEY_COLLECTIONS: COLLECTION_FIELDS,
}

NUMERIC_FIELDS = {
    "loanAmount", "totalInterest", "weeks",
    "weekNo", "amountPaid", "principalPaid", "interestPaid",
}


class KeyValueStore:
    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, text: str):
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    """Non-durable store, for tests and throwaway sessions"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, text: str):
        self.data[key] = text


class ExcelStore(KeyValueStore):
    def __init__(self, filepath: Path = EXCEL_FILE, backup_keep: int = BACKUP_KEEP):
        self.filepath = Path(filepath)
        self.backup_keep = backup_keep

    def init_excel(self):
        """Create the workbook with its info sheet"""
        if self.filepath.exists():
            return
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        info = pd.DataFrame([
            {"key": "created_at", "value": datetime.now().isoformat()},
        ])
        with pd.ExcelWriter(self.filepath, engine="openpyxl") as writer:
            info.to_excel(writer, sheet_name=SHEET_INFO, index=False)
        logger.info("Created workbook %s", self.filepath)

    def backup_excel(self):
        """Copy the workbook before a write, keeping the newest backups only"""
        if not self.filepath.exists():
            return
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        backup_path = self.filepath.with_suffix(f".xlsx.bak_{ts}")
        shutil.copy2(self.filepath, backup_path)
        backups = sorted(self.filepath.parent.glob(f"{self.filepath.stem}.xlsx.bak_*"))
        for old in backups[:-self.backup_keep]:
            old.unlink()

    def sheet_names(self) -> list:
        if not self.filepath.exists():
            return []
        wb = load_workbook(self.filepath, read_only=True)
        try:
            return list(wb.sheetnames)
        finally:
            wb.close()

    def get(self, key: str) -> Optional[str]:
        if key not in self.sheet_names():
            return None
        # text columns stay text: "N/A" or "0987654321" must not be reinterpreted
        text_columns = {c: str for c in SHEET_COLUMNS.get(key, []) if c not in NUMERIC_FIELDS}
        df = pd.read_excel(
            self.filepath, sheet_name=key, engine="openpyxl",
            dtype=text_columns, keep_default_na=False, na_values=[""],
        )
        return df.to_json(orient="records", force_ascii=False)

    def set(self, key: str, text: str):
        records = json.loads(text)
        df = pd.DataFrame(records, columns=SHEET_COLUMNS.get(key))

        self.init_excel()
        self.backup_excel()
        with pd.ExcelWriter(self.filepath, engine="openpyxl", mode="a", if_sheet_exists="replace") as writer:
            df.to_excel(writer, sheet_name=key, index=False)
        logger.debug("Wrote %d rows to sheet %s", len(df), key)
