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
from typing import List

import google.auth
from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import bigquery

from tableschema.config.options import GeneratorConfig
from tableschema.exceptions import ConfigurationError, TableEnumerationError
from tableschema.schema import ColumnSchema, TableSchema

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Client
# -----------------------------------------------------------------------------

def build_client(config: GeneratorConfig) -> bigquery.Client:
  """
  Create a BigQuery client for config.project.

  Uses the credentials file if configured (service account, authorized user
  or external account), otherwise Application Default Credentials. The
  process environment is left untouched.
  """
  try:
    if config.keyfile:
      credentials, _ = google.auth.load_credentials_from_file(config.keyfile)
      return bigquery.Client(project=config.project, credentials=credentials)
    return bigquery.Client(project=config.project)
  except (GoogleAuthError, OSError, ValueError) as exc:
    raise ConfigurationError(f"Cannot create BigQuery client: {exc}") from exc


# -----------------------------------------------------------------------------
# Schema conversion
# -----------------------------------------------------------------------------

def table_schema_from_bigquery(table) -> TableSchema:
  """Convert a google.cloud.bigquery.Table into a TableSchema."""
  full_table_id = table.full_table_id
  if not full_table_id:
    # Tables built client-side carry no full_table_id.
    full_table_id = f"{table.project}:{table.dataset_id}.{table.table_id}"

  columns = tuple(
    ColumnSchema(name=f.name, field_type=f.field_type)
    for f in (table.schema or [])
  )

  return TableSchema(
    table_id=table.table_id or "",
    description=table.description or "",
    full_table_id=full_table_id,
    columns=columns,
  )


# -----------------------------------------------------------------------------
# Enumerator
# -----------------------------------------------------------------------------

class BigQueryTableEnumerator:
  """
  Lists the tables of a dataset together with their schema.

  Two API calls per run plus one per table:
    - client.list_tables(dataset)   -> TableListItem (no schema)
    - client.get_table(item)        -> Table (schema, description)

  Any API error is fatal and raised as TableEnumerationError; an empty
  dataset returns [].
  """

  def __init__(self, client: bigquery.Client):
    self.client = client

  def list_tables(self, dataset_id: str) -> List[TableSchema]:
    if not dataset_id:
      raise ConfigurationError("dataset_id is empty.")

    try:
      items = list(self.client.list_tables(dataset_id))
    except GoogleAPIError as exc:
      raise TableEnumerationError(f"Listing tables of dataset '{dataset_id}' failed: {exc}") from exc

    tables: List[TableSchema] = []
    for item in items:
      try:
        table = self.client.get_table(item)
      except GoogleAPIError as exc:
        raise TableEnumerationError(
          f"Reading metadata of table '{getattr(item, 'table_id', item)}' failed: {exc}"
        ) from exc
      tables.append(table_schema_from_bigquery(table))

    logger.info("Found %d table(s) in dataset %s.", len(tables), dataset_id)
    return tables
