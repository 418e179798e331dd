import uuid
from datetime import datetime


def _generate_id(prefix: str) -> str:
    return f"{prefix}-{datetime.now().strftime('%Y%m%d%H%M%S')}-{uuid.uuid4().hex[:8]}"


def generate_group_id() -> str:
    return _generate_id("GR")


def generate_member_id() -> str:
    return _generate_id("MB")


def generate_collection_id() -> str:
    return _generate_id("CL")
