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

from typing import Iterable


def render_import_block(import_refs: Iterable[str]) -> str:
  """
  Render the import section for all generated structs.

  Duplicates are folded. Rendering by number of distinct refs:
    0   -> ""
    1   -> "import x" + blank line
    2+  -> one "import x" line per ref (sorted) + blank line
  """
  unique = sorted({ref for ref in import_refs if ref})

  if not unique:
    return ""

  if len(unique) == 1:
    return f"import {unique[0]}\n\n"

  code = ""
  for ref in unique:
    code += f"import {ref}\n"
  return code + "\n"
