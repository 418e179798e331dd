"""Persistence bridge and storage tests"""
import json
import logging

import pandas as pd
import pytest

from config.settings import STORAGE_KEY_GROUPS, STORAGE_KEY_MEMBERS, STORAGE_KEY_COLLECTIONS
from config.constants import RecordKind
from core.ledger import MicrofinanceLedger
from data_manager.schema import Group
from data_manager.storage import ExcelStore, MemoryStore


class FailingStore(MemoryStore):
    def set(self, key, text):
        raise OSError("disk full")


class TestLoad:
    def test_missing_keys_use_sample_data(self, substrate):
        ledger = MicrofinanceLedger.open(substrate)
        assert [g.group_no for g in ledger.groups] == ["G001", "G002", "G003"]
        assert len(ledger.members) == 5
        assert len(ledger.collections) == 5

    def test_nothing_written_at_startup(self, substrate):
        MicrofinanceLedger.open(substrate)
        assert substrate.data == {}

    def test_saved_data_used(self):
        substrate = MemoryStore({
            STORAGE_KEY_GROUPS: json.dumps([{"id": "a", "groupNo": "G100", "groupName": "Saved"}]),
            STORAGE_KEY_MEMBERS: "[]",
        })
        ledger = MicrofinanceLedger.open(substrate)
        assert [g.group_no for g in ledger.groups] == ["G100"]
        assert ledger.members == []
        # collections key absent
        assert len(ledger.collections) == 5

    def test_unreadable_data_falls_back_to_sample(self, caplog):
        substrate = MemoryStore({STORAGE_KEY_GROUPS: "{broken"})
        with caplog.at_level(logging.ERROR):
            ledger = MicrofinanceLedger.open(substrate)
        assert len(ledger.groups) == 3
        assert "unreadable" in caplog.text

    @pytest.mark.parametrize("text", [
        '[{"memberId": "M1", "weeks": 1e400}]',
        '[{"memberId": "M1", "weeks": Infinity}]',
    ])
    def test_out_of_range_number_falls_back_to_sample(self, text, caplog):
        substrate = MemoryStore({STORAGE_KEY_MEMBERS: text})
        with caplog.at_level(logging.ERROR):
            ledger = MicrofinanceLedger.open(substrate)
        assert [m.member_id for m in ledger.members] == ["M001", "M002", "M003", "M004", "M005"]
        assert "unreadable" in caplog.text


class TestSave:
    def test_changed_collection_written(self, ledger, substrate):
        ledger.add_group({"groupNo": "G004", "groupName": "New"})
        assert list(substrate.data) == [STORAGE_KEY_GROUPS]
        saved = json.loads(substrate.data[STORAGE_KEY_GROUPS])
        assert [g["groupNo"] for g in saved] == ["G001", "G002", "G003", "G004"]

    def test_collection_write(self, ledger, substrate):
        ledger.add_collection({"memberId": "M002", "groupNo": "G001", "weekNo": 3, "amountPaid": 1500})
        saved = json.loads(substrate.data[STORAGE_KEY_COLLECTIONS])
        assert saved[-1]["principalPaid"] == 1071.43
        assert STORAGE_KEY_MEMBERS not in substrate.data

    def test_reopen_sees_changes(self, ledger, substrate):
        m = ledger.add_member({"memberId": "M006", "groupNo": "G003", "loanAmount": 5000, "totalInterest": 2000, "weeks": 14})
        reopened = MicrofinanceLedger.open(substrate)
        assert reopened.members[-1] == m

    def test_write_failure_is_logged_not_raised(self, caplog):
        ledger = MicrofinanceLedger.open(FailingStore())
        with caplog.at_level(logging.ERROR):
            group = ledger.add_group({"groupNo": "G004"})
        assert ledger.groups[-1] == group
        assert "Failed to persist" in caplog.text


class TestExcelStore:
    @pytest.fixture
    def excel_store(self, tmp_path):
        return ExcelStore(tmp_path / "test_data.xlsx")

    def test_missing_file(self, excel_store):
        assert excel_store.get(STORAGE_KEY_GROUPS) is None
        assert not excel_store.filepath.exists()

    def test_set_creates_sheet(self, excel_store):
        excel_store.set(STORAGE_KEY_GROUPS, json.dumps([{"id": "1", "groupNo": "G001"}]))
        xls = pd.ExcelFile(excel_store.filepath, engine="openpyxl")
        assert STORAGE_KEY_GROUPS in xls.sheet_names
        assert excel_store.get(STORAGE_KEY_MEMBERS) is None

    def test_empty_collection(self, excel_store):
        excel_store.set(STORAGE_KEY_COLLECTIONS, "[]")
        assert json.loads(excel_store.get(STORAGE_KEY_COLLECTIONS)) == []

    def test_ledger_round_trip(self, excel_store):
        ledger = MicrofinanceLedger.open(excel_store)
        ledger.add_group({"groupNo": "G004", "groupName": "Excel Group", "headContact": "9876500000"})
        ledger.add_member({"memberId": "M006", "groupNo": "G004", "loanAmount": 6000, "totalInterest": 2400, "weeks": 12})
        ledger.add_collection({"memberId": "M006", "groupNo": "G004", "weekNo": 1, "amountPaid": 700})

        reopened = MicrofinanceLedger.open(ExcelStore(excel_store.filepath))
        assert reopened.groups == ledger.groups
        assert reopened.members == ledger.members
        assert reopened.collections == ledger.collections

    def test_text_values_kept_verbatim(self, excel_store):
        ledger = MicrofinanceLedger.open(excel_store)
        ledger.store.replace(RecordKind.GROUPS, [
            Group("g1", "001", "Zero Group", "None", "0987654321", "Monday", ""),
            Group("g2", "002", "null", "NA", "", "Tuesday", ""),
        ])
        ledger.add_member({
            "memberId": "007", "memberName": "Devi", "address": "NA", "landmark": "N/A",
            "groupNo": "001", "loanAmount": 5000, "totalInterest": 2000, "weeks": 14,
        })

        reopened = MicrofinanceLedger.open(ExcelStore(excel_store.filepath))
        assert reopened.groups == ledger.groups
        assert reopened.members == ledger.members
        member = reopened.members[-1]
        assert (member.address, member.landmark) == ("NA", "N/A")
        assert reopened.groups[0].head_contact == "0987654321"
        assert reopened.get_group_summary("001").total_members == 1

    def test_backup_before_write(self, excel_store):
        excel_store.set(STORAGE_KEY_GROUPS, "[]")
        excel_store.set(STORAGE_KEY_MEMBERS, "[]")
        backups = list(excel_store.filepath.parent.glob("test_data.xlsx.bak_*"))
        assert 1 <= len(backups) <= excel_store.backup_keep
