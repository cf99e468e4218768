from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from typing import Any

from ..transform.constants import IDENTIFIER_COLUMN
from ..transform.validity import request_type_of

"""RejectRecord model for the rejected-rows log.

One record per upstream row excluded by the validity filter. Serialized as a
single JSON line with a fixed key set.
"""

__all__ = [
    "RejectRecord",
]


@dataclass(frozen=True)
class RejectRecord:
    """Structured record of a row left out of every view.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        original_id: Identifier of the rejected row ("" when absent)
        request_type: Trimmed request type ("" when absent)
        reason: UNKNOWN_REQUEST_TYPE or MISSING_LOCATOR
    """
    timestamp: str
    original_id: str
    request_type: str
    reason: str

    @staticmethod
    def create(row: Mapping[str, Any], reason: str) -> RejectRecord:
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        original_id = row.get(IDENTIFIER_COLUMN)
        return RejectRecord(
            timestamp=ts,
            original_id="" if original_id is None else str(original_id),
            request_type=request_type_of(row),
            reason=reason,
        )

    def to_json_line(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=False)
