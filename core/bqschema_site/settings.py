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

"""
Django settings for bqtableschema.

The project has no database and no web front end; Django provides the
management command runner and the logging setup.
"""

from pathlib import Path

from utils.env import env_bool, env_str

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = env_str("DJANGO_SECRET_KEY", "bqtableschema-not-a-secret")
DEBUG = env_bool("DJANGO_DEBUG", False)

INSTALLED_APPS = [
  "tableschema",
]

DATABASES = {}

USE_TZ = True

# Optional settings file; see tableschema.config.options.find_settings_path
BQTABLESCHEMA_SETTINGS_PATH = env_str("BQTABLESCHEMA_SETTINGS_PATH")

LOG_LEVEL = env_str("BQTABLESCHEMA_LOG_LEVEL", "INFO").upper()

LOGGING = {
  "version": 1,
  "disable_existing_loggers": False,
  "formatters": {
    "plain": {
      "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    },
  },
  "handlers": {
    "console": {
      "class": "logging.StreamHandler",
      "formatter": "plain",
    },
  },
  "loggers": {
    "tableschema": {
      "handlers": ["console"],
      "level": LOG_LEVEL,
      "propagate": True,
    },
  },
}
