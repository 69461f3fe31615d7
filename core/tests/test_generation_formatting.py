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

import sys
from types import SimpleNamespace

import pytest

from tableschema.exceptions import FormattingError
from tableschema.generation import formatting
from tableschema.generation.formatting import RuffFormatter


@pytest.fixture
def fake_run(monkeypatch):
  calls = []
  result = {"returncode": 0, "stdout": None, "stderr": ""}

  def _run(cmd, *, input, **kwargs):
    calls.append({"cmd": cmd, "input": input, "kwargs": kwargs})
    stdout = result["stdout"] if result["stdout"] is not None else input
    return SimpleNamespace(returncode=result["returncode"], stdout=stdout, stderr=result["stderr"])

  monkeypatch.setattr(formatting.subprocess, "run", _run)
  return calls, result


def test_format_source_runs_ruff_format_on_stdin(fake_run):
  calls, _ = fake_run
  fmt = RuffFormatter(line_length=100, stdin_filename="schema.py", command=["ruff"])

  out = fmt.format_source("x=1\n")

  assert out == "x=1\n"
  cmd = calls[0]["cmd"]
  assert cmd[:2] == ["ruff", "format"]
  assert "--isolated" in cmd
  assert cmd[cmd.index("--line-length") + 1] == "100"
  assert cmd[cmd.index("--stdin-filename") + 1] == "schema.py"
  assert cmd[-1] == "-"
  assert calls[0]["input"] == "x=1\n"


def test_resolve_imports_only_fixes_imports(fake_run):
  calls, _ = fake_run
  fmt = RuffFormatter(command=["ruff"])

  fmt.resolve_imports("import os\n")

  cmd = calls[0]["cmd"]
  assert cmd[:2] == ["ruff", "check"]
  assert cmd[cmd.index("--select") + 1] == "I,F401"
  assert "--fix" in cmd
  assert "--exit-zero" in cmd


def test_default_command_uses_current_interpreter(fake_run):
  calls, _ = fake_run
  RuffFormatter().format_source("")

  assert calls[0]["cmd"][:3] == [sys.executable, "-m", "ruff"]


def test_non_zero_exit_raises_formatting_error(fake_run):
  _, result = fake_run
  result.update(returncode=2, stdout="", stderr="error: Failed to parse schema.py:1:5")

  with pytest.raises(FormattingError, match="Failed to parse"):
    RuffFormatter(command=["ruff"]).format_source("x = (\n")


def test_missing_executable_raises_formatting_error(monkeypatch):
  def _run(cmd, **kwargs):
    raise FileNotFoundError(2, "No such file or directory", cmd[0])

  monkeypatch.setattr(formatting.subprocess, "run", _run)

  with pytest.raises(FormattingError, match="could not run"):
    RuffFormatter(command=["no-such-ruff"]).format_source("")


def test_ruff_rejects_malformed_source():
  pytest.importorskip("ruff")

  with pytest.raises(FormattingError):
    RuffFormatter().format_source("class 1Broken:\n    pass\n")

