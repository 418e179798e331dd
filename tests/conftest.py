import sys
import pytest
from pathlib import Path

# Make the project root importable
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from core.ledger import MicrofinanceLedger
from data_manager.storage import MemoryStore


@pytest.fixture
def substrate():
    return MemoryStore()


@pytest.fixture
def ledger(substrate):
    """Ledger seeded with the sample data, persisting into an in-memory store"""
    return MicrofinanceLedger.open(substrate)


@pytest.fixture
def empty_ledger():
    return MicrofinanceLedger.in_memory(seed_sample_data=False)
