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

from django.core.management.base import BaseCommand, CommandError

from tableschema.config.options import load_config
from tableschema.exceptions import TableSchemaError
from tableschema.service import generate_dataset_module, write_output


class Command(BaseCommand):
  help = "Generate dataclass records mirroring every table of a BigQuery dataset."

  requires_system_checks = []

  def add_arguments(self, parser):
    parser.add_argument(
      "--project",
      required=False,
      help="Google Cloud project id (overrides GCLOUD_PROJECT_ID / GOOGLE_CLOUD_PROJECT).",
    )
    parser.add_argument(
      "--dataset",
      required=False,
      help="BigQuery dataset to introspect (overrides BIGQUERY_DATASET).",
    )
    parser.add_argument(
      "--keyfile",
      required=False,
      help="Path to service account json key file (overrides GOOGLE_APPLICATION_CREDENTIALS).",
    )
    parser.add_argument(
      "--output",
      required=False,
      help="Path to output the generated code (overrides OUTPUT_FILE).",
    )
    parser.add_argument(
      "--package",
      required=False,
      help="Package name stated in the generated module docstring.",
    )
    parser.add_argument(
      "--line-length",
      type=int,
      required=False,
      help="Line length used when formatting the generated module.",
    )
    parser.add_argument(
      "--config",
      required=False,
      help="Path to a bqtableschema.yaml settings file.",
    )
    parser.add_argument(
      "--print",
      dest="print_source",
      action="store_true",
      help="Print the generated module instead of writing it to --output.",
    )

  def handle(self, *args, **options):
    # 1) Resolve configuration (option -> env -> settings file -> default)
    try:
      config = load_config(options, settings_path=options.get("config"))
    except TableSchemaError as exc:
      raise CommandError(str(exc))

    # 2) Introspect + generate
    try:
      report = generate_dataset_module(config)
    except TableSchemaError as exc:
      raise CommandError(str(exc))

    for skipped in report.skipped:
      self.stderr.write(self.style.WARNING(f"Skipped table {skipped.table_id}: {skipped.reason}"))

    # 3) Output
    if options.get("print_source"):
      self.stdout.write(report.source.decode("utf-8"), ending="")
      return

    try:
      out_path = write_output(config.output, report.source)
    except OSError as exc:
      raise CommandError(f"Cannot write {config.output}: {exc}")

    self.stdout.write(self.style.SUCCESS(f"Table schema module written to {out_path}"))
    self.stdout.write(f"Structs: {len(report.structs)}")
    self.stdout.write(f"Skipped: {len(report.skipped)}")
