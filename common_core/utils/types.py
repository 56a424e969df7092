# -*- coding: utf-8 -*-
# Common Core
# Author: Luis A. González
# MIT License (view LICENSE file)
# Copyright (c) 2026


def length(text: str | None) -> int:
  """
  Returns the length of a text or 0 if None.

  Args:
    text: Text to measure.

  Returns:
    Number of characters.
  """
  if text is None:
    return 0
  return len(text)


def to_int(value: any, default_value: int = 0) -> int:
  """
  Converts a configuration value to int with fallback.

  Args:
    value: Value to convert (int, float or numeric text).
    default_value: Value returned when the conversion fails.

  Returns:
    Resulting int.
  """
  if isinstance(value, bool):
    return default_value
  if isinstance(value, int):
    return value
  if isinstance(value, float):
    return int(round(value))
  if isinstance(value, str):
    try:
      return int(value.strip())
    except ValueError:
      pass
  return default_value
