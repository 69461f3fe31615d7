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

import keyword


def capitalize_initial(value: str) -> str:
  """
  Upper-case the first character, leave the rest untouched.
  Example: 'order_items' -> 'Order_items', '' -> ''
  """
  if not value:
    return ""
  return value[:1].upper() + value[1:]


def is_valid_identifier(name: str) -> bool:
  """True if name can be used as a Python class or attribute name."""
  return bool(name) and name.isidentifier() and not keyword.iskeyword(name)
