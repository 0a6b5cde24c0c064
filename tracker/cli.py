import logging
import sqlite3
import sys
from pathlib import Path

import fncli
from fncli import UsageError

from . import config, db
from .core.errors import TrackerError
from .lib import ansi
from .store import Store

logger = logging.getLogger(__name__)

_discovered = False


def _discover() -> None:
    global _discovered
    if not _discovered:
        fncli.autodiscover(Path(__file__).parent, "tracker")
        _discovered = True


def run(args: list[str]) -> int:
    """Dispatch one command line. Domain errors become exit code 1."""
    try:
        db.init()
    except (sqlite3.Error, OSError) as e:
        logger.warning("could not open %s (%s); changes will not be saved", config.DB_PATH, e)
    ansi.use(Store().load_theme())
    _discover()

    argv = ["tracker", *(args or ["dashboard"])]
    try:
        return fncli.dispatch(argv) or 0
    except (TrackerError, UsageError) as e:
        sys.stderr.write(f"{e}\n")
        return 1


def main():
    logging.basicConfig(level=config.get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
