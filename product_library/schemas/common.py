"""
==============================================================================
Common Schemas Module
==============================================================================

Serialization of catalog records for API responses.

==============================================================================
"""

from typing import Any, Dict, Iterable, List
from pydantic import BaseModel


def to_json(record: BaseModel) -> Dict[str, Any]:
    """Serialize a catalog record in its camelCase JSON form."""
    return record.model_dump(mode="json", by_alias=True)


def to_json_list(records: Iterable[BaseModel]) -> List[Dict[str, Any]]:
    """Serialize catalog records."""
    return [to_json(r) for r in records]
