# -*- coding: utf-8 -*-
# Common Core
# Author: Luis A. González
# MIT License (view LICENSE file)
# Copyright (c) 2026

from common_core.utils.buffer import TextBuffer
from common_core.utils.scanner import Scanner
from common_core.utils.text import is_null_or_white_space, minimum_of
from common_core.utils.types import length


def split(string: str | None, delimiters: str | None) -> list:
  """
  Splits a text into tokens on any of the given delimiter characters.

  Runs of delimiters count as a single separator, so no empty tokens are
  produced. The source text is not modified.

  Args:
    string: Text to tokenize.
    delimiters: Set of delimiter characters.

  Returns:
    List of tokens in source order. Empty when the text or the delimiter
    set is None or blank.
  """
  if is_null_or_white_space(string):
    return []
  if is_null_or_white_space(delimiters):
    return []
  tokens = []
  scanner = Scanner(string)
  while True:
    scanner.skip_any(delimiters)
    if scanner.is_eos():
      break
    tokens.append(scanner.take_until_any(delimiters))
  return tokens


def get_substring_occurrence_count(string: str | None, substring: str | None) -> int:
  """
  Counts non-overlapping occurrences of a substring.

  The text is scanned left to right and the cursor skips past each match,
  so "aa" occurs once in "aaa".

  Args:
    string: Text to search.
    substring: Text to count.

  Returns:
    Number of occurrences; 0 when either value is None or empty.
  """
  if not string or not substring:
    return 0
  count = 0
  scanner = Scanner(string)
  while not scanner.is_eos():
    if scanner.match(substring):
      count += 1
    else:
      scanner.next()
  return count


def string_replace(string: str | None, target: str | None, replacement: str | None) -> str | None:
  """
  Replaces every non-overlapping occurrence of a substring.

  The result size is computed up front from the occurrence count and the
  output buffer never grows while copying.

  Args:
    string: Source text.
    target: Substring to replace.
    replacement: Replacement text. None removes the target.

  Returns:
    New text, or None when the source or the target is None or empty.
  """
  if not string or not target:
    return None
  if replacement is None:
    replacement = ''
  count = get_substring_occurrence_count(string, target)
  size = len(string) + count * (len(replacement) - len(target))
  out = TextBuffer(size + 1)
  scanner = Scanner(string)
  while not scanner.is_eos():
    if scanner.match(target):
      for char in replacement:
        out.put(char)
    else:
      out.put(scanner.peek_next())
  return out.value


def join_strings(strings: list | None, count: int | None = None) -> tuple | None:
  """
  Concatenates texts in order, without separator.

  Args:
    strings: Texts to concatenate. None elements are taken as empty.
    count: Number of leading elements to use. Defaults to all.

  Returns:
    Tuple (text, size) where size includes the terminator slot, or None
    when the list is None or count is not positive.
  """
  if strings is None:
    return None
  if count is None:
    count = len(strings)
  if count <= 0:
    return None
  count = minimum_of(count, len(strings))
  size = 1
  for idx in range(count):
    size += length(strings[idx])
  out = TextBuffer(size)
  for idx in range(count):
    if strings[idx]:
      out.append(strings[idx])
  return out.value, size


def prepend_to(prefix: str | None, string: str | None) -> str | None:
  """
  Builds prefix + string.

  Args:
    prefix: Text to put in front. Required, not empty.
    string: Text to prepend to. Required, not empty.

  Returns:
    Concatenated text, or None when either value is None or empty.
  """
  if not prefix:
    return None
  if not string:
    return None
  return prefix + string
