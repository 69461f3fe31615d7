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
from pathlib import Path
from typing import Optional

from tableschema.config.options import GeneratorConfig
from tableschema.generation.document import GenerationReport, generate_document
from tableschema.generation.formatting import RuffFormatter, SourceFormatter
from tableschema.introspection.bigquery import BigQueryTableEnumerator, build_client

logger = logging.getLogger(__name__)


def generate_dataset_module(
  config: GeneratorConfig,
  *,
  client=None,
  formatter: Optional[SourceFormatter] = None,
) -> GenerationReport:
  """
  Introspect config.dataset and render the module for all its tables.

  A client passed in is left open; a client created here is closed.
  """
  owns_client = client is None
  if owns_client:
    client = build_client(config)

  if formatter is None:
    formatter = RuffFormatter(
      line_length=config.line_length,
      stdin_filename=Path(config.output).name,
    )

  try:
    tables = BigQueryTableEnumerator(client).list_tables(config.dataset)
    return generate_document(
      tables,
      package=config.package,
      dataset=config.dataset,
      formatter=formatter,
    )
  finally:
    if owns_client:
      client.close()


def write_output(path: str, source: bytes) -> Path:
  out_path = Path(path)
  out_path.parent.mkdir(parents=True, exist_ok=True)
  out_path.write_bytes(source)
  logger.info("Wrote %d bytes to %s", len(source), out_path)
  return out_path
