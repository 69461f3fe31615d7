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

import dataclasses
from typing import Any, Iterable, Iterator, Mapping, Type, TypeVar

from tableschema.constants import TAG_KEY

"""
Bind query results to generated records.

Generated dataclasses carry the original column name in the field metadata
(field(metadata={"bigquery": "<column>"})). A query result row only has to
support row[column], which google.cloud.bigquery.Row and plain dicts do.
"""

T = TypeVar("T")


def column_map(record_cls: Type[Any]) -> dict[str, str]:
  """Return {field name: column name} for a generated record class."""
  if not dataclasses.is_dataclass(record_cls) or not isinstance(record_cls, type):
    raise TypeError(f"{record_cls!r} is not a dataclass type.")

  mapping: dict[str, str] = {}
  for f in dataclasses.fields(record_cls):
    # fields without a tag bind by their own name
    mapping[f.name] = f.metadata.get(TAG_KEY, f.name)
  return mapping


def bind_row(record_cls: Type[T], row: Mapping[str, Any]) -> T:
  kwargs = {}
  for field_name, column in column_map(record_cls).items():
    try:
      kwargs[field_name] = row[column]
    except KeyError:
      raise KeyError(
        f"Column '{column}' required by {record_cls.__name__}.{field_name} "
        "is missing from the row."
      ) from None
  return record_cls(**kwargs)


def bind_rows(record_cls: Type[T], rows: Iterable[Mapping[str, Any]]) -> Iterator[T]:
  for row in rows:
    yield bind_row(record_cls, row)
