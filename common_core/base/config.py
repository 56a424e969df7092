# -*- coding: utf-8 -*-
# Common Core
# Author: Luis A. González
# MIT License (view LICENSE file)
# Copyright (c) 2026

import logging
import os

from common_core.utils.types import to_int


ENV_PREFIX = 'COMMON_CORE_'

DEFAULTS = {
  'log_level': 'WARNING',
  'date_format': '%Y-%m-%d %H:%M:%S',
  'date_size': 64,
}


class Settings(dict):
  """
  Configuration values with attribute access (dot notation).
  """
  __getattr__ = dict.get
  __setattr__ = dict.__setitem__
  __delattr__ = dict.__delitem__

  @staticmethod
  def from_env(environ=None):
    """
    Reads the COMMON_CORE_* variables over the defaults.

    Args:
      environ: Mapping to read from (defaults to os.environ).

    Returns:
      Settings with every key in DEFAULTS.
    """
    if environ is None:
      environ = os.environ
    settings = Settings(DEFAULTS)
    for key, default in DEFAULTS.items():
      raw = environ.get(ENV_PREFIX + key.upper())
      if raw is None or raw.strip() == '':
        continue
      if isinstance(default, int):
        settings[key] = to_int(raw, default)
      else:
        settings[key] = raw.strip()
    return settings


_SETTINGS = Settings.from_env()


def get_settings() -> Settings:
  return _SETTINGS


def reload_settings() -> Settings:
  """Re-reads the environment and replaces the current settings."""
  global _SETTINGS
  _SETTINGS = Settings.from_env()
  return _SETTINGS


def configure_logging(level: str | int | None = None):
  """
  Configures root logging for command line use.

  Args:
    level: Level name or number. Defaults to the log_level setting.
  """
  if level is None:
    level = get_settings().log_level
  if isinstance(level, str):
    level = logging.getLevelName(level.upper())
    if not isinstance(level, int):
      level = logging.WARNING
  logging.basicConfig(
    level=level,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s'
  )
