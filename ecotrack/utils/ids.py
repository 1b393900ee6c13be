# ecotrack/utils/ids.py
import re
import uuid


def new_id(prefix: str) -> str:
    """Generates a prefixed opaque id such as ``evt_1a2b3c4d5e6f``."""
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def looks_like_id(value: str, prefix: str) -> bool:
    return re.fullmatch(rf"{prefix}_[0-9a-f]{{12}}", value or "") is not None
