from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Parses arguments, builds a Logger for the invocation and appends a single
entry. Lets shell scripts and cron jobs write to the same rotating log file
as the Python application.
"""

import os
import sys
from typing import List, Optional

from rotalog.core.logger import Logger
from rotalog.domain.config import ENV_LOG_FILE
from rotalog.domain.errors import ValidationError
from rotalog.interface.cli import args as cli_args

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, 2 for invalid arguments).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    try:
        settings = cli_args.args_to_settings(args)
    except ValidationError as e:
        print(f"ERROR: {e.message}", file=sys.stderr)
        return 2

    environ = dict(os.environ)
    if settings["log_file"]:
        environ[ENV_LOG_FILE] = settings["log_file"]

    logger = Logger(
        environ,
        max_bytes=settings["max_bytes"],
        backup_count=settings["backup_count"],
    )
    logger.log(settings["message"], settings["level"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
