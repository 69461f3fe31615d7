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

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional

import yaml
from django.conf import settings

from tableschema.constants import (
  DEFAULT_LINE_LENGTH,
  DEFAULT_OUTPUT_FILE,
  DEFAULT_PACKAGE,
  ENV_DATASET,
  ENV_KEYFILE,
  ENV_LINE_LENGTH,
  ENV_OUTPUT,
  ENV_PACKAGE,
  ENV_PROJECT,
  ENV_SETTINGS_PATH,
  SETTINGS_FILE_NAME,
)
from tableschema.exceptions import ConfigurationError
from utils.env import env_first, env_str

"""
Generator configuration.

Each setting is resolved from (first non-empty wins):
  1. command-line option
  2. environment variable(s)
  3. bqtableschema.yaml settings file
  4. built-in default

The result is an explicit GeneratorConfig value; nothing downstream reads
the process environment.
"""

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratorConfig:
  project: str
  dataset: str

  # Service account JSON key; None means Application Default Credentials
  keyfile: Optional[str] = None

  output: str = DEFAULT_OUTPUT_FILE
  package: str = DEFAULT_PACKAGE
  line_length: int = DEFAULT_LINE_LENGTH


def resolve_option(
  opt_key: str,
  opt_value: Any,
  env_keys: Iterable[str],
  file_value: Any = None,
  default: Optional[str] = None,
) -> str:
  """
  Return the first non-empty value out of option, env, settings file, default.

  Raises ConfigurationError naming the option and env var to set if all
  sources are empty.
  """
  if not opt_key:
    raise ConfigurationError("opt_key is empty")

  env_keys = tuple(env_keys)

  for candidate in (opt_value, env_first(env_keys), file_value, default):
    if candidate not in (None, ""):
      return str(candidate)

  env_hint = " or ".join(env_keys) if env_keys else "(none)"
  raise ConfigurationError(
    f"set option --{opt_key}, or set environment variable {env_hint}"
  )


def find_settings_path(explicit_path: str | None = None) -> Optional[Path]:
  """
  Locate bqtableschema.yaml:

  1. explicit_path argument (must exist)
  2. BQTABLESCHEMA_SETTINGS_PATH env var
  3. Django settings.BQTABLESCHEMA_SETTINGS_PATH
  4. ./config/bqtableschema.yaml, ./bqtableschema.yaml

  The settings file is optional: returns None if nothing is found.
  """
  if explicit_path:
    path = Path(explicit_path)
    if not path.exists():
      raise ConfigurationError(f"Settings file not found: {path}")
    return path

  candidates: list[Path] = []

  env_path = env_str(ENV_SETTINGS_PATH)
  if env_path:
    candidates.append(Path(env_path))

  cfg_path = getattr(settings, "BQTABLESCHEMA_SETTINGS_PATH", None) if settings.configured else None
  if cfg_path:
    candidates.append(Path(cfg_path))

  candidates += [
    Path.cwd() / "config" / SETTINGS_FILE_NAME,
    Path.cwd() / SETTINGS_FILE_NAME,
  ]

  for c in candidates:
    if c.exists():
      return c
  return None


def load_settings_file(path: Optional[Path]) -> Dict[str, Any]:
  if path is None:
    return {}

  try:
    with open(path, "r", encoding="utf-8") as f:
      data = yaml.safe_load(f) or {}
  except OSError as exc:
    raise ConfigurationError(f"Cannot read settings file {path}: {exc}") from exc
  except yaml.YAMLError as exc:
    raise ConfigurationError(f"Invalid YAML in settings file {path}: {exc}") from exc

  if not isinstance(data, dict):
    raise ConfigurationError(
      f"Settings file {path} must contain a mapping, got {type(data).__name__}."
    )

  logger.debug("Loaded settings from %s", path)
  return data


def read_keyfile_project(path: str) -> str:
  """
  Read the project_id out of a service account JSON key file.
  Returns "" if the key file does not name a project.
  """
  try:
    with open(path, "r", encoding="utf-8") as f:
      raw = f.read()
  except OSError as exc:
    raise ConfigurationError(f"Cannot read key file {path}: {exc}") from exc

  try:
    data = json.loads(raw)
  except json.JSONDecodeError as exc:
    raise ConfigurationError(f"Key file {path} is not valid JSON: {exc}") from exc

  if not isinstance(data, dict):
    raise ConfigurationError(f"Key file {path} is not a service account key.")

  return str(data.get("project_id") or "")


def _to_line_length(value: str) -> int:
  try:
    n = int(value)
  except (TypeError, ValueError):
    raise ConfigurationError(f"line length must be an integer, got {value!r}") from None
  if n <= 0:
    raise ConfigurationError(f"line length must be positive, got {n}")
  return n


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------
def load_config(
  options: Mapping[str, Any] | None = None,
  settings_path: str | None = None,
) -> GeneratorConfig:
  """
  Build the GeneratorConfig from command options (dict as passed to
  BaseCommand.handle), environment and settings file.
  """
  options = options or {}
  file_values = load_settings_file(find_settings_path(settings_path))

  keyfile = options.get("keyfile") or env_first(ENV_KEYFILE) or file_values.get("keyfile") or None

  # The key file names its own project; use it as the last fallback.
  keyfile_project = read_keyfile_project(keyfile) if keyfile else ""

  project = resolve_option(
    "project",
    options.get("project"),
    ENV_PROJECT,
    file_values.get("project"),
    keyfile_project or None,
  )
  dataset = resolve_option(
    "dataset",
    options.get("dataset"),
    ENV_DATASET,
    file_values.get("dataset"),
  )
  output = resolve_option(
    "output",
    options.get("output"),
    ENV_OUTPUT,
    file_values.get("output"),
    DEFAULT_OUTPUT_FILE,
  )
  package = resolve_option(
    "package",
    options.get("package"),
    ENV_PACKAGE,
    file_values.get("package"),
    DEFAULT_PACKAGE,
  )
  line_length = _to_line_length(resolve_option(
    "line-length",
    options.get("line_length"),
    ENV_LINE_LENGTH,
    file_values.get("line_length"),
    str(DEFAULT_LINE_LENGTH),
  ))

  return GeneratorConfig(
    project=project,
    dataset=dataset,
    keyfile=keyfile,
    output=output,
    package=package,
    line_length=line_length,
  )
