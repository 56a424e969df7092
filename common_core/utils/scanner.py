# -*- coding: utf-8 -*-
# Common Core
# Author: Luis A. González
# MIT License (view LICENSE file)
# Copyright (c) 2026


class Scanner:
  """
  Left-to-right cursor over a read-only text.
  """
  EOS = -1

  def __init__(self, value: str):
    """
    Creates a scanner positioned at the first character.

    Args:
      value: Text to traverse.
    """
    self.value = value
    self.idx = 0

  def peek(self, offset=0):
    """
    Returns the character at the current position + offset.

    Args:
      offset: Relative offset from the cursor.

    Returns:
      Character at the position or EOS if out of range.
    """
    if self.idx + offset < len(self.value):
      return self.value[self.idx + offset]
    return Scanner.EOS

  def next(self, count=1):
    """
    Advances the cursor N positions.

    Args:
      count: Number of positions to advance.
    """
    self.idx += count

  def peek_next(self):
    """
    Returns the current character and advances the cursor by 1.
    """
    ch = self.peek()
    self.next()
    return ch

  def is_eos(self):
    """
    Indicates whether the cursor is at the end of the text.

    Returns:
      True if no characters remain.
    """
    return self.idx >= len(self.value)

  def match(self, word: str) -> bool:
    """
    Checks whether the text at the cursor starts with a word.

    Args:
      word: Text to compare.

    Returns:
      True if it matches; the cursor is moved past the word in that case.
    """
    if self.value.startswith(word, self.idx):
      self.next(len(word))
      return True
    return False

  def skip_any(self, chars: str):
    """
    Advances past a run of characters belonging to a set.

    Args:
      chars: Character set.
    """
    while not self.is_eos() and self.peek() in chars:
      self.next()

  def take_until_any(self, chars: str) -> str:
    """
    Extracts the run of characters up to the next one in a set.

    Args:
      chars: Character set ending the run.

    Returns:
      Extracted text (possibly empty). The cursor stops on the delimiter.
    """
    start = self.idx
    while not self.is_eos() and self.peek() not in chars:
      self.next()
    return self.value[start:self.idx]
