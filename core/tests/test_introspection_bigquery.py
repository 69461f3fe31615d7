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

import json

import pytest
from google.api_core.exceptions import Forbidden, NotFound
from google.cloud import bigquery

from tableschema.config.options import GeneratorConfig
from tableschema.exceptions import ConfigurationError, TableEnumerationError
from tableschema.introspection.bigquery import (
  BigQueryTableEnumerator,
  build_client,
  table_schema_from_bigquery,
)
from tests._helpers import DummyBigQueryClient


def _bq_table(table_ref: str, fields, description=None) -> bigquery.Table:
  table = bigquery.Table(table_ref, schema=fields)
  table.description = description
  return table


@pytest.fixture
def sales_tables():
  return {
    "orders": _bq_table(
      "shop-prod.sales.orders",
      [bigquery.SchemaField("id", "INTEGER"), bigquery.SchemaField("total", "FLOAT")],
      description="All orders",
    ),
    "events": _bq_table(
      "shop-prod.sales.events",
      [bigquery.SchemaField("ts", "TIMESTAMP")],
    ),
  }


def test_table_schema_from_bigquery_keeps_columns_in_order(sales_tables):
  schema = table_schema_from_bigquery(sales_tables["orders"])

  assert schema.table_id == "orders"
  assert schema.description == "All orders"
  assert [(c.name, c.field_type) for c in schema.columns] == [("id", "INTEGER"), ("total", "FLOAT")]


def test_table_schema_from_bigquery_builds_full_id_for_local_tables(sales_tables):
  schema = table_schema_from_bigquery(sales_tables["events"])

  assert schema.full_table_id == "shop-prod:sales.events"
  assert schema.description == ""


def test_table_schema_from_bigquery_keeps_record_type():
  table = _bq_table(
    "p.d.customers",
    [
      bigquery.SchemaField(
        "address",
        "RECORD",
        fields=[bigquery.SchemaField("city", "STRING")],
      ),
    ],
  )
  schema = table_schema_from_bigquery(table)
  assert schema.columns[0].field_type == "RECORD"


def test_list_tables_fetches_metadata_per_table_in_order(sales_tables):
  client = DummyBigQueryClient(sales_tables)

  tables = BigQueryTableEnumerator(client).list_tables("sales")

  assert [t.table_id for t in tables] == ["orders", "events"]
  assert client.list_calls == ["sales"]
  assert client.get_calls == ["orders", "events"]


def test_list_tables_empty_dataset_returns_empty_list():
  assert BigQueryTableEnumerator(DummyBigQueryClient({})).list_tables("empty") == []


def test_list_tables_listing_failure_is_distinguishable_from_empty():
  client = DummyBigQueryClient(list_error=NotFound("Dataset p:nope was not found"))

  with pytest.raises(TableEnumerationError, match="nope"):
    BigQueryTableEnumerator(client).list_tables("nope")


def test_list_tables_metadata_failure_is_fatal(sales_tables):
  client = DummyBigQueryClient(sales_tables, get_error=Forbidden("Access Denied"))

  with pytest.raises(TableEnumerationError, match="orders"):
    BigQueryTableEnumerator(client).list_tables("sales")


def test_list_tables_requires_dataset():
  with pytest.raises(ConfigurationError):
    BigQueryTableEnumerator(DummyBigQueryClient()).list_tables("")


def test_build_client_missing_keyfile_is_configuration_error(tmp_path):
  config = GeneratorConfig(project="p", dataset="d", keyfile=str(tmp_path / "missing.json"))

  with pytest.raises(ConfigurationError, match="Cannot create BigQuery client"):
    build_client(config)


def test_build_client_invalid_keyfile_is_configuration_error(tmp_path):
  keyfile = tmp_path / "key.json"
  keyfile.write_text("not json", encoding="utf-8")
  config = GeneratorConfig(project="p", dataset="d", keyfile=str(keyfile))

  with pytest.raises(ConfigurationError):
    build_client(config)


class RecordingClient:
  def __init__(self, project=None, credentials=None):
    self.project = project
    self.credentials = credentials


AUTHORIZED_USER_KEY = {
  "type": "authorized_user",
  "client_id": "123.apps.googleusercontent.com",
  "client_secret": "secret",
  "refresh_token": "refresh",
}

EXTERNAL_ACCOUNT_KEY = {
  "type": "external_account",
  "audience": "//iam.googleapis.com/projects/1/locations/global/workloadIdentityPools/pool/providers/prov",
  "subject_token_type": "urn:ietf:params:oauth:token-type:jwt",
  "token_url": "https://sts.googleapis.com/v1/token",
  "credential_source": {"file": "/var/run/token"},
}


@pytest.mark.parametrize(
  "key, expected_class",
  [
    (AUTHORIZED_USER_KEY, "google.oauth2.credentials.Credentials"),
    (EXTERNAL_ACCOUNT_KEY, "google.auth.identity_pool.Credentials"),
  ],
)
def test_build_client_accepts_non_service_account_keyfiles(tmp_path, monkeypatch, key, expected_class):
  keyfile = tmp_path / "credentials.json"
  keyfile.write_text(json.dumps(key), encoding="utf-8")
  monkeypatch.setattr(bigquery, "Client", RecordingClient)

  client = build_client(GeneratorConfig(project="p", dataset="d", keyfile=str(keyfile)))

  assert client.project == "p"
  cls = type(client.credentials)
  assert f"{cls.__module__}.{cls.__name__}" == expected_class


def test_build_client_without_keyfile_uses_default_credentials(monkeypatch):
  monkeypatch.setattr(bigquery, "Client", RecordingClient)

  client = build_client(GeneratorConfig(project="p", dataset="d"))

  assert client.project == "p"
  assert client.credentials is None
