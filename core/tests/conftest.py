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

import pytest

from tableschema.schema import TableSchema
from tests._helpers import IdentityFormatter


@pytest.fixture
def identity_formatter():
  return IdentityFormatter()


@pytest.fixture
def orders_table():
  return TableSchema.build(
    "orders",
    [("id", "INTEGER"), ("total", "FLOAT")],
    description="All orders",
    full_table_id="shop-prod:sales.orders",
  )


@pytest.fixture
def events_table():
  return TableSchema.build(
    "events",
    [("ts", "TIMESTAMP")],
    full_table_id="shop-prod:sales.events",
  )


@pytest.fixture
def nested_table():
  return TableSchema.build(
    "customers",
    [("id", "INTEGER"), ("address", "RECORD")],
    full_table_id="shop-prod:sales.customers",
  )


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
  """Isolate config resolution from the caller's environment and cwd."""
  for key in (
    "GCLOUD_PROJECT_ID",
    "GOOGLE_CLOUD_PROJECT",
    "BIGQUERY_DATASET",
    "GOOGLE_APPLICATION_CREDENTIALS",
    "OUTPUT_FILE",
    "BQTABLESCHEMA_PACKAGE",
    "BQTABLESCHEMA_LINE_LENGTH",
    "BQTABLESCHEMA_SETTINGS_PATH",
  ):
    monkeypatch.delenv(key, raising=False)
  monkeypatch.chdir(tmp_path)
  return tmp_path
