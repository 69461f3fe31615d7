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
import subprocess
import sys
from typing import Protocol, Sequence

from tableschema.constants import DEFAULT_LINE_LENGTH, DEFAULT_OUTPUT_FILE
from tableschema.exceptions import FormattingError

logger = logging.getLogger(__name__)


class SourceFormatter(Protocol):
  def format_source(self, source: str) -> str: ...

  def resolve_imports(self, source: str) -> str: ...


class RuffFormatter:
  """
  Formats generated modules with ruff, reading from stdin.

    - format_source:   `ruff format`
    - resolve_imports: `ruff check --fix` restricted to import sorting (I)
                       and unused imports (F401)

  Both steps run with --isolated so a ruff config in the working directory
  cannot change the generated output.
  """

  def __init__(
    self,
    *,
    line_length: int = DEFAULT_LINE_LENGTH,
    stdin_filename: str = DEFAULT_OUTPUT_FILE,
    command: Sequence[str] | None = None,
  ):
    self.line_length = int(line_length)
    self.stdin_filename = stdin_filename
    self.command = list(command) if command else [sys.executable, "-m", "ruff"]

  def _run(self, step: str, args: list[str], source: str) -> str:
    cmd = [*self.command, *args]
    logger.debug("Running %s: %s", step, " ".join(cmd))

    try:
      proc = subprocess.run(
        cmd,
        input=source,
        capture_output=True,
        text=True,
        encoding="utf-8",
        check=False,
      )
    except OSError as exc:
      raise FormattingError(f"{step}: could not run {cmd[0]!r}: {exc}") from exc

    if proc.returncode != 0:
      detail = (proc.stderr or proc.stdout or "").strip()
      raise FormattingError(f"{step} failed (exit code {proc.returncode}): {detail}")

    return proc.stdout

  def _common_args(self) -> list[str]:
    return [
      "--isolated",
      "--line-length", str(self.line_length),
      "--stdin-filename", self.stdin_filename,
    ]

  def format_source(self, source: str) -> str:
    return self._run("ruff format", ["format", *self._common_args(), "-"], source)

  def resolve_imports(self, source: str) -> str:
    # --exit-zero: leftover lint findings are not an error, a parse failure still is
    args = ["check", *self._common_args(), "--select", "I,F401", "--fix", "--exit-zero", "-"]
    return self._run("ruff check", args, source)
