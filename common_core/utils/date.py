# -*- coding: utf-8 -*-
# Common Core
# Author: Luis A. González
# MIT License (view LICENSE file)
# Copyright (c) 2026

from datetime import datetime

from common_core.base.errors import fatal
from common_core.utils.text import is_null_or_white_space


def format_date(size: int, date_format: str | None, when: datetime | None = None) -> str:
  """
  Formats the current local date/time with a strftime format.

  Args:
    size: Buffer size, terminator included.
    date_format: strftime format string.
    when: Date/time to format instead of the current one.

  Returns:
    Formatted text, or '' if it needs more than size - 1 characters.

  Raises:
    FatalError: If size is not positive or the format is blank.
  """
  if size is None or size <= 0:
    raise fatal("FormatDate: Invalid buffer and/or size passed.")
  if is_null_or_white_space(date_format):
    raise fatal("FormatDate: Format string is missing.")
  if when is None:
    when = datetime.now()
  text = when.strftime(date_format)
  if len(text) > size - 1:
    return ''
  return text
