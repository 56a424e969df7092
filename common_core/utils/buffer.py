# -*- coding: utf-8 -*-
# Common Core
# Author: Luis A. González
# MIT License (view LICENSE file)
# Copyright (c) 2026

from common_core.base.errors import throw_argument_out_of_range_exception

NUL = '\0'


class TextBuffer:
  """
  Fixed-capacity character buffer. One slot is reserved for the
  terminator, so at most capacity - 1 characters are stored.

  Attributes:
    capacity: Total number of slots.
    size: Number of characters written.
  """
  def __init__(self, capacity: int):
    """
    Creates a zero-filled buffer.

    Args:
      capacity: Number of slots, terminator included.

    Raises:
      ArgumentOutOfRangeException: If capacity is negative.
    """
    if capacity < 0:
      throw_argument_out_of_range_exception('capacity')
    self.capacity = capacity
    self.chars = [NUL] * capacity
    self.size = 0

  def clear(self, count: int | None = None):
    """
    Zero-fills the first count slots (all of them by default) and
    rewinds the write position.

    Args:
      count: Number of slots to clear.
    """
    if count is None or count > self.capacity:
      count = self.capacity
    for idx in range(count):
      self.chars[idx] = NUL
    self.size = 0

  def room(self) -> int:
    """Number of characters that can still be written."""
    if self.capacity == 0:
      return 0
    return self.capacity - 1 - self.size

  def put(self, char: str):
    """
    Writes one character at the current position.

    Raises:
      IndexError: If the buffer is full.
    """
    if self.room() <= 0:
      raise IndexError('TextBuffer overflow')
    self.chars[self.size] = char
    self.size += 1

  def append(self, text: str) -> int:
    """
    Copies as much of a text as fits.

    Args:
      text: Text to copy.

    Returns:
      Number of characters written. Shorter than the text when truncated.
    """
    count = min(len(text), self.room())
    for idx in range(count):
      self.chars[self.size + idx] = text[idx]
    self.size += count
    return count

  @property
  def value(self) -> str:
    return ''.join(self.chars[:self.size])

  def release(self):
    """Drops the storage. The buffer behaves as capacity 0 afterwards."""
    self.chars = []
    self.capacity = 0
    self.size = 0

  def __len__(self):
    return self.size

  def __str__(self):
    return self.value


def free_buffer(buffer: TextBuffer | None):
  """
  Releases a buffer early. Optional: buffers are released when unreferenced.

  Args:
    buffer: Buffer to release, or None.
  """
  if buffer is None:
    return
  buffer.release()


def free_string_array(strings: list | None, count: int):
  """
  Empties a list of strings returned by split or similar.

  Args:
    strings: List to empty, or None.
    count: Number of elements the caller owns; must be positive.
  """
  if strings is None:
    return
  if count <= 0:
    return
  strings.clear()
