"""Capture and format the call stack of the running program."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from itertools import islice
from types import FrameType
from typing import Iterator


def _basename(path: str) -> str:
    return re.split(r"[\\/]", path)[-1]


@dataclass
class StackFrame:
    """One resolved frame of a call stack."""

    module_name: str = ""
    function_name: str = ""
    file_name: str = ""
    line_number: int = 0
    address: int = 0
    module_base: int = 0
    offset: int = 0

    def to_string(self) -> str:
        """Describe the frame with as much detail as was resolved."""
        if self.file_name and self.line_number > 0:
            return (
                f"[{self.module_name}] {self.function_name} at "
                f"{self.file_name}:{self.line_number} (0x{self.address:016X})"
            )
        if self.function_name:
            return (
                f"[{self.module_name}] {self.function_name} + 0x{self.offset:X} "
                f"(0x{self.address:016X})"
            )
        return f"[{self.module_name}] 0x{self.address:016X}"

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class StackWalkerConfig:
    """What a stack walk collects and how many frames it keeps."""

    max_frames: int = 64
    skip_frames: int = 0
    capture_source_info: bool = True
    use_symbols: bool = True
    undecorate_symbols: bool = True

    def __post_init__(self) -> None:
        if self.max_frames < 0:
            raise ValueError("max_frames must not be negative")
        if self.skip_frames < 0:
            raise ValueError("skip_frames must not be negative")


def _outward(frame: FrameType | None) -> Iterator[FrameType]:
    while frame is not None:
        yield frame
        frame = frame.f_back


def _module_name(frame: FrameType) -> str:
    path = frame.f_code.co_filename
    if path and not path.startswith("<"):
        return _basename(path)
    return "Unknown"


class StackWalker:
    """Walks frames outward from a starting frame and resolves each one."""

    def __init__(self, config: StackWalkerConfig | None = None) -> None:
        self.config = config if config is not None else StackWalkerConfig()

    def capture_stack(self, frame: FrameType | None = None) -> list[StackFrame]:
        """Return the frames from ``frame`` outward, innermost first.

        Without a frame the walk starts at the caller.
        """
        if frame is None:
            frame = sys._getframe(1)
        start = self.config.skip_frames
        resolved = (self._resolve(each) for each in _outward(frame))
        return list(islice(resolved, start, start + self.config.max_frames))

    def _resolve(self, frame: FrameType) -> StackFrame:
        code = frame.f_code
        base = id(code)
        offset = max(frame.f_lasti, 0)
        result = StackFrame(module_name=_module_name(frame), address=base + offset)
        if not self.config.use_symbols:
            return result
        if self.config.undecorate_symbols:
            result.function_name = getattr(code, "co_qualname", code.co_name)
        else:
            result.function_name = code.co_name
        result.offset = offset
        result.module_base = base
        if self.config.capture_source_info:
            result.file_name = _basename(code.co_filename)
            result.line_number = frame.f_lineno or 0
        return result

    @staticmethod
    def format_stack_trace(frames: list[StackFrame]) -> str:
        """Render frames as an indented, numbered trace."""
        lines = ["Stack Trace:\n"]
        lines.extend(f"  [{index}] {frame.to_string()}\n" for index, frame in enumerate(frames))
        return "".join(lines)