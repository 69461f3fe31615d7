"""
bqtableschema - BigQuery table schema code generator
Copyright © 2026 Ilona Tag

This file is part of bqtableschema.

bqtableschema is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as
published by the Free Software Foundation, either version 3 of
the License, or (at your option) any later version.

bqtableschema is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with bqtableschema. If not, see <https://www.gnu.org/licenses/>.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple

"""
Warehouse-neutral table schema values.

TableSchema is what the introspection layer produces and the generation
layer consumes; neither side needs the BigQuery client types.
"""


@dataclass(frozen=True)
class ColumnSchema:
  name: str
  field_type: str


@dataclass(frozen=True)
class TableSchema:
  table_id: str
  description: str = ""
  # e.g. "my-project:my_dataset.orders"
  full_table_id: str = ""
  columns: Tuple[ColumnSchema, ...] = field(default_factory=tuple)

  @classmethod
  def build(
    cls,
    table_id: str,
    columns: Iterable[tuple[str, str]] = (),
    *,
    description: str | None = None,
    full_table_id: str | None = None,
  ) -> "TableSchema":
    """Convenience constructor from (name, field_type) pairs."""
    return cls(
      table_id=table_id,
      description=description or "",
      full_table_id=full_table_id or "",
      columns=tuple(ColumnSchema(name=n, field_type=t) for n, t in columns),
    )
