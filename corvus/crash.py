"""Assertions, the crash handler and guarded execution."""

from __future__ import annotations

import linecache
import re
import sys
import threading
from dataclasses import dataclass
from types import FrameType, TracebackType
from typing import Any, Callable, TypeVar

from corvus.logger import LogChannel, LogSeverity, log
from corvus.names import Name
from corvus.stackwalker import StackWalker
from corvus.strings import format_string, to_string

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

LOG_CRASH_HANDLER = LogChannel(Name("CrashHandler"), LogSeverity.ERROR)

_T = TypeVar("_T")


@dataclass
class AssertionData:
    """What a failed assertion reports: the condition and where it failed."""

    condition: str
    result_code: int = 0
    message: str = ""
    file_name: str = ""
    line: int = 0
    function_name: str = ""


class EngineAssertionError(AssertionError):
    """Raised when a verified condition does not hold."""

    def __init__(self, data: AssertionData) -> None:
        super().__init__(data.message or data.condition)
        self.data = data


def verify(condition: Any, message: str | None = None, *args: Any) -> None:
    """Raise EngineAssertionError if ``condition`` is false.

    ``message`` is a brace format string filled from ``args``; the
    condition is reported as the source line of the call.
    """
    if condition:
        return
    caller = sys._getframe(1)
    code = caller.f_code
    source = linecache.getline(code.co_filename, caller.f_lineno).strip()
    data = AssertionData(
        condition=source or "<unknown>",
        message=format_string(message, *args) if message is not None else "",
        file_name=code.co_filename,
        line=caller.f_lineno,
        function_name=getattr(code, "co_qualname", code.co_name),
    )
    raise EngineAssertionError(data)


def _innermost_frame(error: BaseException) -> FrameType | None:
    tb = error.__traceback__
    if tb is None:
        return None
    while tb.tb_next is not None:
        tb = tb.tb_next
    return tb.tb_frame


class CrashHandler:
    """Reports unhandled errors and remembers that the program failed."""

    _exit_code = EXIT_SUCCESS

    @classmethod
    def setup(cls) -> None:
        """Route uncaught errors of all threads through ``handle``."""
        sys.excepthook = cls._excepthook
        threading.excepthook = cls._thread_excepthook

    @classmethod
    def _excepthook(
        cls,
        exc_type: type[BaseException],
        exc_value: BaseException,
        exc_traceback: TracebackType | None,
    ) -> None:
        if isinstance(exc_value, Exception):
            cls.handle(exc_value)
        else:
            sys.__excepthook__(exc_type, exc_value, exc_traceback)

    @classmethod
    def _thread_excepthook(cls, args: threading.ExceptHookArgs) -> None:
        if isinstance(args.exc_value, Exception):
            cls.handle(args.exc_value)
        else:
            threading.__excepthook__(args)

    @classmethod
    def handle(cls, error: BaseException) -> str:
        """Log and print a report for ``error``, set the failure exit code and return the report."""
        cls._exit_code = EXIT_FAILURE

        parts: list[str] = []
        if isinstance(error, EngineAssertionError):
            data = error.data
            if data.message:
                parts.append(data.message + "\n\n")
            parts.append(f"Condition: {data.condition}\n")
            parts.append(f"File: {re.split(r'[\\/]', data.file_name)[-1]}\n")
            parts.append(f"Line: {to_string(data.line)}\n")
            parts.append(f"Function: {data.function_name}\n")

        origin = _innermost_frame(error) or sys._getframe(1)
        frames = StackWalker().capture_stack(origin)

        log(LOG_CRASH_HANDLER, LogSeverity.CRITICAL, "Stack Trace:")
        for index, frame in enumerate(frames):
            log(LOG_CRASH_HANDLER, LogSeverity.CRITICAL, "\t[{}] {}", index, frame.to_string())

        report = "".join(parts) + "\n" + StackWalker.format_stack_trace(frames)
        sys.stderr.write(f"Corvus | Exception\n{report}")
        sys.stderr.flush()
        return report

    @classmethod
    def exit_code(cls) -> int:
        """Return 0 until an error has been handled, then 1."""
        return cls._exit_code


def guarded_execute(function: Callable[[], _T], invalid_value: Any = None) -> _T | Any:
    """Call ``function``; if it raises, report the error and return ``invalid_value``."""
    try:
        return function()
    except Exception as error:
        CrashHandler.handle(error)
        return invalid_value