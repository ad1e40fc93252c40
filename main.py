#!/usr/bin/env python3
"""
ballin - interactive command interpreter

This is the main entry point for ballin.

Example session:
    >> iota 1 4 | echo numbers
    numbers 1 2 3 4
    >> apply hex 10 255 | echo
    0xa 0xff
    >> calc ( 1 + 2 ) * 3 | echo
    9
"""

import sys
from pathlib import Path
from typing import Optional

from ballin.core.config_loader import ConfigLoader
from ballin.exceptions import InterpreterException
from ballin.logger import Logger, LogLevel
from ballin.shell.shell import Shell


def main(config_path: Optional[str] = None) -> int:
    """
    Main entry point for ballin.

    Startup sequence:
    1. Load configuration (if the file exists)
    2. Initialize logging
    3. Start shell
    """
    path = Path(config_path) if config_path else Path(__file__).with_name('config.json')

    loader = ConfigLoader()
    if path.exists():
        try:
            loader.load(str(path))
        except InterpreterException as e:
            print(f"Startup failed: {e}", file=sys.stderr)
            return 1

    config = loader.config
    Logger.initialize(
        level=LogLevel.from_name(config.logging.level),
        log_file=config.logging.log_file,
        console=config.logging.console_output
    )

    shell = Shell(config=config)

    try:
        shell.run()
    except KeyboardInterrupt:
        print("\n\nInterrupted")

    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else None))
