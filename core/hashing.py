"""
Hashing Module - SHA256 Seals for Tax Records

Canonical JSON serialization and SHA256 digests. Order metadata stores the
seal of its tax breakdown so ledger reconciliation can detect records that
were edited after checkout.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import hashlib
import json
from datetime import date, datetime
from decimal import Decimal
from typing import Any


def _decimal_to_json(value: Decimal):
    # 18 and 18.0 must seal identically; fractions keep their exact digits
    if value == value.to_integral_value():
        return int(value)
    return str(value.normalize())


def canonical_json_dumps(obj: Any) -> str:
    """
    Serialize object to canonical JSON string.

    - Keys sorted alphabetically
    - No whitespace
    - Decimals as int when integral, exact string otherwise
    - Dates as ISO-8601

    Example:
        >>> canonical_json_dumps({"total": 1800, "rate": Decimal("18")})
        '{"rate":18,"total":1800}'
    """
    def default_handler(o):
        if isinstance(o, Decimal):
            return _decimal_to_json(o)
        elif isinstance(o, (date, datetime)):
            return o.isoformat()
        elif hasattr(o, 'to_dict'):
            return o.to_dict()
        else:
            raise TypeError(f"Object of type {type(o).__name__} is not JSON serializable")

    return json.dumps(
        obj,
        sort_keys=True,
        separators=(',', ':'),
        default=default_handler,
        ensure_ascii=True
    )


def calculate_sha256(data: Any) -> str:
    """
    Calculate SHA256 hash of data.

    Returns:
        SHA256 hex digest prefixed with 'sha256:'
    """
    json_str = canonical_json_dumps(data)
    hash_obj = hashlib.sha256(json_str.encode('utf-8'))
    return f"sha256:{hash_obj.hexdigest()}"


def verify_hash(data: Any, expected_hash: str) -> bool:
    """True when data hashes to expected_hash."""
    return calculate_sha256(data) == expected_hash
