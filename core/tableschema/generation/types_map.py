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

from typing import Tuple

"""
BigQuery field type -> Python type mapping.

Return format (ALWAYS a 2-tuple):
  (type_name: str, import_ref: str)

import_ref is the module the type name lives in, or "" for builtins.
"""

from tableschema.exceptions import UnsupportedFieldTypeError

# BigQuery field types (legacy names as returned by the tables API)
STRING = "STRING"
BYTES = "BYTES"
INTEGER = "INTEGER"
FLOAT = "FLOAT"
BOOLEAN = "BOOLEAN"
TIMESTAMP = "TIMESTAMP"
DATE = "DATE"
TIME = "TIME"
DATETIME = "DATETIME"
NUMERIC = "NUMERIC"
GEOGRAPHY = "GEOGRAPHY"
RECORD = "RECORD"

# Standard SQL spellings of the same types
_ALIASES = {
  "INT64": INTEGER,
  "FLOAT64": FLOAT,
  "BOOL": BOOLEAN,
  "BIGNUMERIC": NUMERIC,
  "STRUCT": RECORD,
}

_TYPE_MAP: dict[str, Tuple[str, str]] = {
  STRING: ("str", ""),
  GEOGRAPHY: ("str", ""),
  BYTES: ("bytes", ""),
  INTEGER: ("int", ""),
  FLOAT: ("float", ""),
  BOOLEAN: ("bool", ""),
  TIMESTAMP: ("datetime.datetime", "datetime"),
  DATE: ("datetime.date", "datetime"),
  TIME: ("datetime.time", "datetime"),
  DATETIME: ("datetime.datetime", "datetime"),
  NUMERIC: ("decimal.Decimal", "decimal"),
}


def normalize_field_type(field_type: object) -> str:
  """Uppercase the type name and fold Standard SQL aliases onto legacy names."""
  t = str(field_type or "").strip().upper()
  return _ALIASES.get(t, t)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------
def map_field_type(field_type: object) -> Tuple[str, str]:
  """
  Map a BigQuery field type onto (type_name, import_ref).

  RECORD columns and unknown types raise UnsupportedFieldTypeError.
  Nested records are not rendered.
  """
  t = normalize_field_type(field_type)
  try:
    return _TYPE_MAP[t]
  except KeyError:
    raise UnsupportedFieldTypeError(field_type) from None
