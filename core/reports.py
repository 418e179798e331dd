"""Tabular views of the summaries and the Excel report"""
from pathlib import Path
from typing import List

import pandas as pd

from config.constants import (
    MEMBER_SUMMARY_COLUMNS, GROUP_SUMMARY_COLUMNS, WEEKLY_DATA_COLUMNS,
    SHEET_MEMBER_SUMMARY, SHEET_GROUP_SUMMARY, SHEET_WEEKLY, SHEET_OVERALL,
)
from config.settings import REPORT_FILE
from core.ledger import MicrofinanceLedger
from data_manager.schema import Record


def records_to_frame(records: List[Record], columns: List[str] = None) -> pd.DataFrame:
    return pd.DataFrame([r.to_dict() for r in records], columns=columns)


def member_summary_frame(ledger: MicrofinanceLedger) -> pd.DataFrame:
    return records_to_frame(ledger.get_all_member_summaries(), MEMBER_SUMMARY_COLUMNS)


def group_summary_frame(ledger: MicrofinanceLedger) -> pd.DataFrame:
    return records_to_frame(ledger.get_all_group_summaries(), GROUP_SUMMARY_COLUMNS)


def weekly_frame(ledger: MicrofinanceLedger) -> pd.DataFrame:
    return records_to_frame(ledger.get_weekly_data(), WEEKLY_DATA_COLUMNS)


def overall_frame(ledger: MicrofinanceLedger) -> pd.DataFrame:
    """Overall summary as metric/value rows"""
    overall = ledger.get_overall_summary().to_dict()
    return pd.DataFrame({"metric": list(overall), "value": list(overall.values())})


def export_report(ledger: MicrofinanceLedger, filepath: Path = REPORT_FILE) -> Path:
    """Write overall, group, member and weekly summaries to one workbook"""
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    sheets = {
        SHEET_OVERALL: overall_frame(ledger),
        SHEET_GROUP_SUMMARY: group_summary_frame(ledger),
        SHEET_MEMBER_SUMMARY: member_summary_frame(ledger),
        SHEET_WEEKLY: weekly_frame(ledger),
    }
    with pd.ExcelWriter(filepath, engine="openpyxl") as writer:
        for sheet_name, df in sheets.items():
            df.round(2).to_excel(writer, sheet_name=sheet_name, index=False)
    return filepath
