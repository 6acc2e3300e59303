"""Program entry point: starts and stops the engine under the crash handler."""

from __future__ import annotations

import sys
from typing import Sequence

from corvus import logger
from corvus.crash import CrashHandler, guarded_execute
from corvus.engine import Engine, get_engine


def guarded_main() -> None:
    """Initialize the engine, shut it down and drop it."""
    get_engine().initialize()
    get_engine().shutdown()
    Engine.destroy_instance()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the engine and return the process exit code.

    Command-line arguments are accepted and ignored.
    """
    logger.setup()
    CrashHandler.setup()
    guarded_execute(guarded_main)
    exit_code = CrashHandler.exit_code()
    logger.destroy()
    return exit_code


if __name__ == "__main__":
    sys.exit(main())