# -*- coding: utf-8 -*-
# Common Core
# Author: Luis A. González
# MIT License (view LICENSE file)
# Copyright (c) 2026

import logging
import sys


log = logging.getLogger(__name__)

# "C" locale isspace
WHITESPACE = ' \t\n\v\f\r'

OK = 0
ERROR = -1

ARGUMENT_OUT_OF_RANGE = "The argument '%s' is outside of the range of valid values."


class FatalError(SystemExit):
  """
  Unrecoverable error. Terminates the process with the ERROR exit code
  unless a top-level handler catches it explicitly.

  Attributes:
    message: Diagnostic text already written to stderr.
  """
  def __init__(self, message: str | None = None, code: int = ERROR):
    """
    Creates the fatal error.

    Args:
      message: Diagnostic text.
      code: Process exit code.
    """
    super().__init__(code)
    self.message = message

  def __str__(self) -> str:
    return self.message or ''


class ArgumentOutOfRangeException(FatalError):
  """
  Fatal error raised for invalid size/buffer arguments.

  Attributes:
    param_name: Name of the offending argument.
  """
  def __init__(self, param_name: str | None):
    message = ARGUMENT_OUT_OF_RANGE % param_name if param_name else None
    super().__init__(message)
    self.param_name = param_name


def _print_error(message: str):
  print(message, file=sys.stderr)


def fatal(message: str) -> FatalError:
  """
  Writes a diagnostic to stderr and builds the matching fatal error.

  Args:
    message: Diagnostic text.

  Returns:
    FatalError ready to be raised.
  """
  _print_error(message)
  log.debug("fatal: %s", message)
  return FatalError(message)


def handle_error(message: str | None, error: BaseException | None = None):
  """
  Reports an error message plus the system error and exits with ERROR.

  Args:
    message: Error text to echo on stderr. Blank messages are ignored.
    error: Optional exception whose text is reported after the message,
      the way perror reports errno.

  Raises:
    FatalError: Always, unless the message is blank.
  """
  if message is None or message.strip(WHITESPACE) == '':
    return
  _print_error(message)
  if error is not None:
    if isinstance(error, OSError) and error.strerror:
      _print_error(error.strerror)
    else:
      _print_error(str(error))
  log.debug("handle_error: %s (%r)", message, error)
  raise FatalError(message)


def throw_argument_out_of_range_exception(param_name: str | None):
  """
  Reports an out-of-range argument and exits with ERROR.

  Args:
    param_name: Name of the argument. Not reported when blank.

  Raises:
    ArgumentOutOfRangeException: Always.
  """
  if param_name is not None and param_name.strip(WHITESPACE) != '':
    _print_error(ARGUMENT_OUT_OF_RANGE % param_name)
  else:
    param_name = None
  raise ArgumentOutOfRangeException(param_name)
