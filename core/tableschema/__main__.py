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

import os
import sys


def main(argv=None):
  """Run the generate_table_schema command without manage.py."""
  os.environ.setdefault("DJANGO_SETTINGS_MODULE", "bqschema_site.settings")

  from django.core.management import execute_from_command_line

  args = sys.argv[1:] if argv is None else list(argv)
  execute_from_command_line(["bqtableschema", "generate_table_schema", *args])


if __name__ == "__main__":
  main()
