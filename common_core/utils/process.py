# -*- coding: utf-8 -*-
# Common Core
# Author: Luis A. González
# MIT License (view LICENSE file)
# Copyright (c) 2026

import logging
import subprocess

from common_core.base.errors import fatal
from common_core.utils.text import is_null_or_white_space


log = logging.getLogger(__name__)

ENCODING = 'utf-8'


def get_system_command_output(command: str | None) -> list | None:
  """
  Runs a shell command and captures its output lines.

  Blocks until the command closes its output stream. Output is read as
  bytes and split on line feeds only; each line is decoded as UTF-8 with
  surrogateescape, so undecodable bytes survive. Blank lines are dropped
  and line terminators removed.

  Args:
    command: Command line passed to the shell.

  Returns:
    List of non-blank output lines, or None if the command is empty.

  Raises:
    FatalError: If the command cannot be launched.
  """
  if not command:
    return None
  try:
    process = subprocess.Popen(
        command,
        shell=True,
        stdout=subprocess.PIPE
    )
  except OSError as e:
    log.debug("Popen failed for %r: %s", command, e)
    raise fatal("Failed to run command") from e
  log.debug("Command launched: %s", command)
  lines = []
  with process:
    for line in process.stdout:
      line = line.rstrip(b'\r\n').decode(ENCODING, 'surrogateescape')
      if is_null_or_white_space(line):
        continue
      lines.append(line)
  log.debug("Command exited with status %s, %d lines", process.returncode, len(lines))
  return lines
