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

import logging
from dataclasses import dataclass, field, replace
from typing import List, Optional

from tableschema.constants import TAG_KEY
from tableschema.exceptions import (
  MalformedTableError,
  StructGenerationError,
  UnsupportedFieldTypeError,
)
from tableschema.generation.naming import capitalize_initial, is_valid_identifier
from tableschema.generation.types_map import map_field_type
from tableschema.schema import TableSchema

logger = logging.getLogger(__name__)

INDENT = "    "


@dataclass(frozen=True)
class GeneratedField:
  name: str
  type_name: str
  # original column name, carried in the field metadata
  tag: str
  import_ref: Optional[str] = None

  def render(self) -> str:
    return f'{INDENT}{self.name}: {self.type_name} = field(metadata={{"{TAG_KEY}": "{self.tag}"}})\n'


@dataclass(frozen=True)
class GeneratedStruct:
  name: str
  table_id: str
  full_table_id: str
  description: str
  fields: List[GeneratedField] = field(default_factory=list)
  text: str = ""

  @property
  def import_refs(self) -> List[str]:
    """Non-empty import refs in column order (duplicates kept)."""
    return [f.import_ref for f in self.fields if f.import_ref]


def _docstring_text(value: str) -> str:
  """Flatten to one line and escape for use inside a triple-quoted docstring."""
  flat = " ".join((value or "").split())
  return flat.replace("\\", "\\\\").replace('"', '\\"')


def _build_field(table: TableSchema, column) -> GeneratedField:
  name = capitalize_initial(column.name)
  if not is_valid_identifier(name):
    raise MalformedTableError(
      f"Column name {column.name!r} of table {table.table_id!r} "
      "is not a valid Python identifier."
    )

  try:
    type_name, import_ref = map_field_type(column.field_type)
  except UnsupportedFieldTypeError as exc:
    raise StructGenerationError(table.table_id, column.name, str(exc)) from exc

  return GeneratedField(
    name=name,
    type_name=type_name,
    tag=column.name,
    import_ref=import_ref or None,
  )


def render_struct(struct: GeneratedStruct) -> str:
  """
  Render a dataclass declaration:

    @dataclass
    class Orders:
        \"\"\"Orders is BigQuery table `p:d.orders` schema struct.
        Description: ...
        \"\"\"
        Id: int = field(metadata={"bigquery": "id"})
  """
  code = (
    "@dataclass\n"
    f"class {struct.name}:\n"
    f'{INDENT}"""{struct.name} is BigQuery table `{_docstring_text(struct.full_table_id)}` schema struct.\n'
    f"{INDENT}Description: {_docstring_text(struct.description)}\n"
    f'{INDENT}"""\n'
  )
  for f in struct.fields:
    code += f.render()
  return code + "\n\n"


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------
def generate_struct(table: TableSchema) -> GeneratedStruct:
  """
  Build the dataclass declaration for one table.

  Raises:
    MalformedTableError: empty or unusable table id / column name.
    StructGenerationError: a column type cannot be mapped. No partial
      struct is returned in that case.
  """
  if not table.table_id:
    raise MalformedTableError(f"TableSchema.table_id is empty. TableSchema dump: {table!r}")

  struct_name = capitalize_initial(table.table_id)
  if not is_valid_identifier(struct_name):
    raise MalformedTableError(
      f"Table id {table.table_id!r} does not produce a valid Python class name."
    )

  fields = [_build_field(table, column) for column in table.columns]

  struct = GeneratedStruct(
    name=struct_name,
    table_id=table.table_id,
    full_table_id=table.full_table_id,
    description=table.description,
    fields=fields,
  )
  logger.debug("Generated struct %s (%d fields)", struct_name, len(fields))
  return replace(struct, text=render_struct(struct))
