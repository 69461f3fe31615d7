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
from typing import Iterable, Optional

def env_str(key: str, default: Optional[str] = None) -> Optional[str]:
  """Get env var as string with default."""
  val = os.getenv(key)
  return val if val not in (None, "") else default

def env_bool(key: str, default: bool = False) -> bool:
  """Get env var as boolean."""
  val = os.getenv(key)
  return default if val is None else val.strip().lower() in ("1","true","yes","on")

def env_first(keys: Iterable[str], default: Optional[str] = None) -> Optional[str]:
  """Get the first non-empty env var out of several keys."""
  for key in keys:
    val = env_str(key)
    if val is not None:
      return val
  return default
