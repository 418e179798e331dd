from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent

# Data files
DATA_DIR = PROJECT_ROOT / "data"
EXCEL_FILE = DATA_DIR / "microfinance_data.xlsx"
REPORT_FILE = DATA_DIR / "microfinance_report.xlsx"
BACKUP_KEEP = 5

# Storage keys, one per collection
STORAGE_KEY_GROUPS = "microfinance_groups"
STORAGE_KEY_MEMBERS = "microfinance_members"
STORAGE_KEY_COLLECTIONS = "microfinance_collections"

# Default loan terms for new members
DEFAULT_LOAN_WEEKS = 14
DEFAULT_INTEREST_RATIO = 0.4

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Page config
PAGE_TITLE = "Microfinance Group Lending Tracker"
PAGE_ICON = "💰"
LAYOUT = "wide"

# Chart colours
COLORS = {
    "primary": "#1f77b4",
    "secondary": "#ff7f0e",
    "success": "#2ca02c",
    "danger": "#d62728",
    "warning": "#bcbd22",
    "info": "#17becf",
    "principal": "#1f77b4",
    "interest": "#ff7f0e",
    "paid": "#2ca02c",
    "unpaid": "#d62728",
}

# Amount precision
AMOUNT_PRECISION = 2
RATE_PRECISION = 2
