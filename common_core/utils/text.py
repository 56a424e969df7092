# -*- coding: utf-8 -*-
# Common Core
# Author: Luis A. González
# MIT License (view LICENSE file)
# Copyright (c) 2026

from common_core.base.errors import WHITESPACE, throw_argument_out_of_range_exception
from common_core.utils.buffer import TextBuffer

_ASCII_LOWER = str.maketrans('ABCDEFGHIJKLMNOPQRSTUVWXYZ', 'abcdefghijklmnopqrstuvwxyz')


def is_space(char: str) -> bool:
  return char != '' and char in WHITESPACE


def is_digit(char: str) -> bool:
  return '0' <= char <= '9'


def is_upper(char: str) -> bool:
  return 'A' <= char <= 'Z'


def is_alnum(char: str) -> bool:
  return is_digit(char) or is_upper(char) or 'a' <= char <= 'z'


def to_lower(text: str) -> str:
  """ASCII-only lowercase conversion."""
  return text.translate(_ASCII_LOWER)


def trim_into(out: TextBuffer, string: str | None):
  """
  Stores a text without leading/trailing whitespace into a buffer.

  The buffer is zero-filled for its full capacity before copying. If the
  trimmed text does not fit, it is truncated.

  Args:
    out: Destination buffer. Nothing is done when its capacity is 0.
    string: Text to trim.
  """
  if out.capacity == 0:
    return
  out.clear()
  if not string:
    return
  start = 0
  end = len(string)
  while start < end and is_space(string[start]):
    start += 1
  while end > start and is_space(string[end - 1]):
    end -= 1
  out.append(string[start:end])


def trim(string: str | None, length: int | None = None) -> str:
  """
  Trims whitespace from both ends.

  Args:
    string: Text to clean.
    length: Destination capacity, terminator included. Defaults to the
      length of the text plus one; smaller values truncate the result.

  Returns:
    Text without leading/trailing whitespace.

  Raises:
    ArgumentOutOfRangeException: If length is negative.
  """
  if length is None:
    length = (len(string) if string else 0) + 1
  if length < 0:
    throw_argument_out_of_range_exception('length')
  out = TextBuffer(length)
  trim_into(out, string)
  return out.value


def is_null_or_white_space(text: str | None) -> bool:
  """
  Checks whether a text is None, empty or only whitespace.

  Args:
    text: Text to evaluate.

  Returns:
    True if nothing remains after trimming.
  """
  if text is None or len(text) == 0:
    return True
  return len(trim(text)) == 0


def clear_string(buffer: TextBuffer | None, size: int):
  """
  Fills a buffer with terminator characters.

  Args:
    buffer: Buffer to clear. Nothing is done when its content is blank.
    size: Number of slots to clear.

  Raises:
    ArgumentOutOfRangeException: If size is zero or negative.
  """
  if buffer is None or is_null_or_white_space(buffer.value):
    return
  if size <= 0:
    throw_argument_out_of_range_exception('size')
  buffer.clear(size)


def contains(text: str | None, substring: str | None) -> bool:
  """
  Checks whether a text contains a substring (case-sensitive).

  Args:
    text: Text to search.
    substring: Text to look for.

  Returns:
    False when either value is blank or the substring is missing.
  """
  if is_null_or_white_space(text):
    return False
  if is_null_or_white_space(substring):
    return False
  return substring in text


def contains_no_case(text: str | None, substring: str | None) -> bool:
  """
  Same as contains, ignoring ASCII case.
  """
  if is_null_or_white_space(text):
    return False
  if is_null_or_white_space(substring):
    return False
  return to_lower(substring) in to_lower(text)


def _require(value: str | None, name: str):
  if value is None:
    throw_argument_out_of_range_exception(name)


def equals(text1: str, text2: str) -> bool:
  """
  Compares two texts exactly. Both values are required.

  Raises:
    ArgumentOutOfRangeException: If a value is None.
  """
  _require(text1, 'text1')
  _require(text2, 'text2')
  return text1 == text2


def equals_no_case(text1: str, text2: str) -> bool:
  """
  Compares two texts ignoring ASCII case. Both values are required.

  Raises:
    ArgumentOutOfRangeException: If a value is None.
  """
  _require(text1, 'text1')
  _require(text2, 'text2')
  return to_lower(text1) == to_lower(text2)


def is_alpha_numeric(text: str | None) -> bool:
  """
  Checks whether a text contains only letters and digits.

  Args:
    text: Text to evaluate. Spaces are not allowed anywhere.

  Returns:
    True if every character is A-Z, a-z or 0-9. A blank text is never
    alphanumeric.
  """
  if is_null_or_white_space(text):
    return False
  for char in text:
    if not is_alnum(char):
      return False
  return True


def is_numeric(text: str | None) -> bool:
  """
  Checks whether a text contains only digits.

  Args:
    text: Text to evaluate. Signs, decimal points and spaces are rejected.

  Returns:
    True if every character is 0-9.
  """
  if is_null_or_white_space(text):
    return False
  for char in text:
    if not is_digit(char):
      return False
  return True


def is_uppercase(text: str | None) -> bool:
  """
  Checks whether a trimmed text contains only uppercase letters.

  Args:
    text: Text to evaluate. Surrounding whitespace is ignored.

  Returns:
    True if every character of the trimmed text is A-Z.
  """
  if is_null_or_white_space(text):
    return False
  for char in trim(text):
    if not is_upper(char):
      return False
  return True


def starts_with(text: str, prefix: str) -> bool:
  """
  Checks whether a text begins with a prefix.

  Args:
    text: Text to examine.
    prefix: Prefix to look for.

  Returns:
    False if the prefix is longer than the text.

  Raises:
    ArgumentOutOfRangeException: If a value is None.
  """
  _require(text, 'text')
  _require(prefix, 'prefix')
  if len(text) < len(prefix):
    return False
  return text[:len(prefix)] == prefix


def minimum_of(a: int, b: int) -> int:
  if a <= b:
    return a
  return b
