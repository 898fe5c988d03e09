"""Table definitions."""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class SchemaField:
    name: str
    source_type: str
    column_type: Optional[str] = None


@dataclass
class SchemaInfo:
    table_name: str
    fields: List[SchemaField] = field(default_factory=list)
    last_idx: int = -1

    def to_context(self) -> dict:
        """Template variables for this table."""
        return {
            "table_name": self.table_name,
            "fields": [
                {
                    "name": f.name,
                    "source_type": f.source_type,
                    "column_type": f.column_type or "",
                }
                for f in self.fields
            ],
            "last_idx": self.last_idx,
        }
