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
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from tableschema.constants import DEFAULT_PACKAGE, HEADER_TEMPLATE, REGENERATE_COMMAND
from tableschema.exceptions import MalformedTableError, TableGenerationError
from tableschema.generation.formatting import RuffFormatter, SourceFormatter
from tableschema.generation.import_block import render_import_block
from tableschema.generation.struct_code import GeneratedStruct, generate_struct
from tableschema.schema import TableSchema

"""
Document assembly.

A generated module is:
  header (banner, regeneration command, package docstring)
  + import block
  + one dataclass per table, in enumeration order

Tables that fail struct generation are logged and skipped; a document the
formatter rejects aborts the run.
"""

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkippedTable:
  table_id: str
  reason: str


@dataclass
class GenerationReport:
  source: bytes
  structs: List[GeneratedStruct] = field(default_factory=list)
  skipped: List[SkippedTable] = field(default_factory=list)

  @property
  def struct_names(self) -> List[str]:
    return [s.name for s in self.structs]

  @property
  def import_refs(self) -> List[str]:
    return sorted({ref for s in self.structs for ref in s.import_refs})


def render_header(
  *,
  package: str = DEFAULT_PACKAGE,
  dataset: str = "",
  command: str = REGENERATE_COMMAND,
) -> str:
  return HEADER_TEMPLATE.format(
    command=command,
    dataset=dataset or "<dataset>",
    package=package,
  )


def assemble_document(
  header: str,
  import_block: str,
  struct_texts: Iterable[str],
  *,
  formatter: Optional[SourceFormatter] = None,
) -> bytes:
  """
  Concatenate header, import block and struct texts, then run the
  formatter and the import resolver over the result.

  Raises FormattingError if either step fails.
  """
  code = header + import_block + "".join(struct_texts)

  formatter = formatter or RuffFormatter()
  formatted = formatter.format_source(code)
  resolved = formatter.resolve_imports(formatted)

  return resolved.encode("utf-8")


def generate_document(
  tables: Iterable[TableSchema],
  *,
  package: str = DEFAULT_PACKAGE,
  dataset: str = "",
  command: str = REGENERATE_COMMAND,
  formatter: Optional[SourceFormatter] = None,
) -> GenerationReport:
  structs: List[GeneratedStruct] = []
  skipped: List[SkippedTable] = []
  import_refs: List[str] = []
  seen: dict[str, str] = {}

  for table in tables:
    try:
      struct = generate_struct(table)
      if struct.name in seen:
        raise MalformedTableError(
          f"Struct name {struct.name!r} of table {table.table_id!r} collides "
          f"with table {seen[struct.name]!r}."
        )
    except TableGenerationError as exc:
      # One bad table must not abort the whole module.
      logger.warning("Skipping table %r: %s", table.table_id, exc)
      skipped.append(SkippedTable(table_id=table.table_id, reason=str(exc)))
      continue

    seen[struct.name] = table.table_id
    structs.append(struct)
    import_refs.extend(struct.import_refs)

  source = assemble_document(
    render_header(package=package, dataset=dataset, command=command),
    render_import_block(import_refs),
    [s.text for s in structs],
    formatter=formatter,
  )

  logger.info(
    "Generated %d struct(s), skipped %d table(s).",
    len(structs),
    len(skipped),
  )
  return GenerationReport(source=source, structs=structs, skipped=skipped)
