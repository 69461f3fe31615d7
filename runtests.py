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
from pathlib import Path

import pytest


def main():
  """Configure Django and run pytest."""
  root = Path(__file__).resolve().parent

  # Ensure 'core' (tableschema, bqschema_site) and the repository root (utils) are importable
  for path in (root / "core", root):
    if str(path) not in sys.path:
      sys.path.insert(0, str(path))

  os.environ.setdefault("DJANGO_SETTINGS_MODULE", "bqschema_site.settings")

  # Run tests in core/tests
  return pytest.main([str(root / "core" / "tests")])


if __name__ == "__main__":
  raise SystemExit(main())
