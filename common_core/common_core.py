"""Common Core CLI entrypoint.

Exposes the string utilities on the command line, mainly for shell scripts
and quick checks. Every sub-command prints its result on stdout.
"""

import argparse
import logging
import os
import sys

if __package__ in (None, ""):
  repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
  if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from common_core.base.config import configure_logging, get_settings
from common_core.base.errors import OK
from common_core.utils import date as date_util
from common_core.utils import process as process_util
from common_core.utils import strings
from common_core.utils import text


log = logging.getLogger(__name__)

CHECKS = {
  'blank': text.is_null_or_white_space,
  'alnum': text.is_alpha_numeric,
  'numeric': text.is_numeric,
  'upper': text.is_uppercase,
}


def _print_lines(lines: list | None):
  for line in lines or []:
    print(line)


def _print_value(value):
  if value is None:
    return
  print(value)


def _run_trim(args):
  _print_value(text.trim(args.text, args.length))


def _run_split(args):
  _print_lines(strings.split(args.text, args.delimiters))


def _run_replace(args):
  _print_value(strings.string_replace(args.text, args.target, args.replacement))


def _run_count(args):
  print(strings.get_substring_occurrence_count(args.text, args.substring))


def _run_join(args):
  result = strings.join_strings(args.texts)
  if result:
    _print_value(result[0])


def _run_prepend(args):
  _print_value(strings.prepend_to(args.prefix, args.text))


def _run_date(args):
  settings = get_settings()
  date_format = args.format if args.format is not None else settings.date_format
  size = args.size if args.size is not None else settings.date_size
  _print_value(date_util.format_date(size, date_format))


def _run_command(args):
  _print_lines(process_util.get_system_command_output(args.command))


def _run_check(args):
  print(str(CHECKS[args.check](args.text)).lower())


def build_parser() -> argparse.ArgumentParser:
  """Builds the argument parser with one sub-command per operation."""
  parser = argparse.ArgumentParser(
    prog="common-core",
    description="Common string utilities"
  )
  parser.add_argument(
    "-v", "--verbose",
    action="store_true",
    help="Enable debug logging"
  )
  commands = parser.add_subparsers(dest="operation", required=True)

  cmd = commands.add_parser("trim", help="Remove leading and trailing whitespace")
  cmd.add_argument("text")
  cmd.add_argument("-n", "--length", type=int, default=None, help="Destination capacity (truncates)")
  cmd.set_defaults(func=_run_trim)

  cmd = commands.add_parser("split", help="Split on any delimiter character, one token per line")
  cmd.add_argument("text")
  cmd.add_argument("delimiters")
  cmd.set_defaults(func=_run_split)

  cmd = commands.add_parser("replace", help="Replace every occurrence of a substring")
  cmd.add_argument("text")
  cmd.add_argument("target")
  cmd.add_argument("replacement")
  cmd.set_defaults(func=_run_replace)

  cmd = commands.add_parser("count", help="Count non-overlapping occurrences of a substring")
  cmd.add_argument("text")
  cmd.add_argument("substring")
  cmd.set_defaults(func=_run_count)

  cmd = commands.add_parser("join", help="Concatenate texts without separator")
  cmd.add_argument("texts", nargs="*")
  cmd.set_defaults(func=_run_join)

  cmd = commands.add_parser("prepend", help="Put a prefix in front of a text")
  cmd.add_argument("prefix")
  cmd.add_argument("text")
  cmd.set_defaults(func=_run_prepend)

  cmd = commands.add_parser("date", help="Format the current date/time")
  cmd.add_argument("-f", "--format", default=None, help="strftime format")
  cmd.add_argument("-s", "--size", type=int, default=None, help="Buffer size")
  cmd.set_defaults(func=_run_date)

  cmd = commands.add_parser("run", help="Run a shell command and print its non-blank lines")
  cmd.add_argument("command")
  cmd.set_defaults(func=_run_command)

  cmd = commands.add_parser("check", help="Classify a text")
  cmd.add_argument("check", choices=sorted(CHECKS.keys()))
  cmd.add_argument("text")
  cmd.set_defaults(func=_run_check)
  return parser


def main(argv: list | None = None):
  """CLI entrypoint for common-core."""
  parser = build_parser()
  args = parser.parse_args(argv)
  configure_logging(logging.DEBUG if args.verbose else None)
  log.debug("Operation: %s", args.operation)
  args.func(args)
  return OK


if __name__ == "__main__":
  ret = main()
  exit(ret)
