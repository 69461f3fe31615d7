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

# Field metadata key carrying the original column name
TAG_KEY = "bigquery"

# Command printed into the generated file header
REGENERATE_COMMAND = "python -m tableschema"

DEFAULT_OUTPUT_FILE = "bqtableschema_generated.py"
DEFAULT_PACKAGE = "bqtableschema"
DEFAULT_LINE_LENGTH = 88
SETTINGS_FILE_NAME = "bqtableschema.yaml"

# Environment variables, in lookup order per setting
ENV_PROJECT = ("GCLOUD_PROJECT_ID", "GOOGLE_CLOUD_PROJECT")
ENV_DATASET = ("BIGQUERY_DATASET",)
ENV_KEYFILE = ("GOOGLE_APPLICATION_CREDENTIALS",)
ENV_OUTPUT = ("OUTPUT_FILE",)
ENV_PACKAGE = ("BQTABLESCHEMA_PACKAGE",)
ENV_LINE_LENGTH = ("BQTABLESCHEMA_LINE_LENGTH",)
ENV_SETTINGS_PATH = "BQTABLESCHEMA_SETTINGS_PATH"

HEADER_TEMPLATE = '''\
# Code generated by {command}; DO NOT EDIT.
# To regenerate: {command} --dataset {dataset}

"""BigQuery table schema records for package `{package}`."""

from dataclasses import dataclass, field

'''
