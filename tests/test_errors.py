"""
Unit tests for the fatal error helpers.
"""

import pytest

from common_core.base.errors import (
  ARGUMENT_OUT_OF_RANGE,
  ERROR,
  OK,
  ArgumentOutOfRangeException,
  FatalError,
  fatal,
  handle_error,
  throw_argument_out_of_range_exception,
)


class TestSentinels:
  """Tests for the exit code sentinels."""

  def test_values(self):
    """Success and failure codes are distinct."""
    assert OK == 0
    assert ERROR == -1


class TestHandleError:
  """Tests for handle_error."""

  def test_blank_message_is_noop(self, capsys):
    """Blank messages are ignored."""
    assert handle_error(None) is None
    assert handle_error("") is None
    assert handle_error("   ") is None
    assert capsys.readouterr().err == ""

  def test_message_is_fatal(self, capsys):
    """The message goes to stderr and the process exit code is ERROR."""
    with pytest.raises(FatalError) as exc:
      handle_error("boom")
    assert exc.value.code == ERROR
    assert exc.value.message == "boom"
    assert capsys.readouterr().err == "boom\n"

  def test_non_ascii_space_is_not_blank(self, capsys):
    """Only the C locale whitespace set makes a message blank."""
    with pytest.raises(FatalError):
      handle_error("\u00a0")
    assert capsys.readouterr().err == "\u00a0\n"

  def test_system_error_reported(self, capsys):
    """The system error text follows the message."""
    with pytest.raises(FatalError):
      handle_error("cannot open", OSError(2, "No such file or directory"))
    assert capsys.readouterr().err == "cannot open\nNo such file or directory\n"

  def test_other_error_reported(self, capsys):
    """Non-OS errors are reported with their text."""
    with pytest.raises(FatalError):
      handle_error("bad value", ValueError("not a number"))
    assert "not a number" in capsys.readouterr().err

  def test_not_swallowed_by_except_exception(self):
    """Ordinary exception handlers do not catch fatal errors."""
    def guarded():
      try:
        handle_error("boom")
      except Exception:
        return "swallowed"
      return "returned"

    with pytest.raises(SystemExit):
      guarded()


class TestArgumentOutOfRange:
  """Tests for throw_argument_out_of_range_exception."""

  def test_named(self, capsys):
    """The argument name is reported."""
    with pytest.raises(ArgumentOutOfRangeException) as exc:
      throw_argument_out_of_range_exception("nSize")
    assert exc.value.param_name == "nSize"
    assert exc.value.code == ERROR
    assert capsys.readouterr().err == (ARGUMENT_OUT_OF_RANGE % "nSize") + "\n"

  def test_blank_name(self, capsys):
    """Blank names still exit, silently."""
    with pytest.raises(ArgumentOutOfRangeException) as exc:
      throw_argument_out_of_range_exception("")
    assert exc.value.param_name is None
    assert capsys.readouterr().err == ""

  def test_non_ascii_space_name_reported(self, capsys):
    """A name made of non C locale whitespace is still reported."""
    with pytest.raises(ArgumentOutOfRangeException) as exc:
      throw_argument_out_of_range_exception("\u00a0")
    assert exc.value.param_name == "\u00a0"
    assert capsys.readouterr().err == (ARGUMENT_OUT_OF_RANGE % "\u00a0") + "\n"

  def test_is_fatal(self):
    """Argument errors are fatal errors."""
    assert issubclass(ArgumentOutOfRangeException, FatalError)


class TestFatal:
  """Tests for fatal."""

  def test_builds_error(self, capsys):
    """The diagnostic is written before raising."""
    error = fatal("stop")
    assert isinstance(error, FatalError)
    assert str(error) == "stop"
    assert capsys.readouterr().err == "stop\n"
