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

"""
Exception hierarchy for schema generation.

Per-table errors (UnsupportedFieldTypeError, StructGenerationError,
MalformedTableError) are turned into skipped tables by the document
assembler. Everything else aborts the run.
"""


class TableSchemaError(Exception):
  """Base class for all errors raised by bqtableschema."""


# -----------------------------------------------------------------------------
# Run-level errors
# -----------------------------------------------------------------------------

class ConfigurationError(TableSchemaError):
  """A required setting is missing or unusable."""


class TableEnumerationError(TableSchemaError):
  """Listing the tables of a dataset or reading table metadata failed."""


class FormattingError(TableSchemaError):
  """The source formatter or the import resolver rejected the document."""


# -----------------------------------------------------------------------------
# Table-level errors
# -----------------------------------------------------------------------------

class TableGenerationError(TableSchemaError):
  """Struct generation failed for a single table."""


class MalformedTableError(TableGenerationError, ValueError):
  """The table schema cannot be rendered (e.g. empty table id)."""


class UnsupportedFieldTypeError(TableGenerationError, ValueError):
  """The BigQuery field type has no Python counterpart."""

  def __init__(self, field_type: object):
    self.field_type = field_type
    super().__init__(f"BigQuery field type not supported. field_type={field_type}")


class StructGenerationError(TableGenerationError):
  """A column of the table could not be rendered."""

  def __init__(self, table_id: str, column_name: str, message: str):
    self.table_id = table_id
    self.column_name = column_name
    super().__init__(f"table '{table_id}', column '{column_name}': {message}")
