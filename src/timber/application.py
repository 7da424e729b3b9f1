import sys
from pathlib import Path

UNNAMED_APP = "<UnnamedApp>"


def application_name() -> str:
    """
    Name of the host process, used in formatted lines and log file names.

    Falls back to UNNAMED_APP when the process has no usable name, e.g.
    under `python -c` where argv[0] is "-c".
    """
    try:
        argv0 = sys.argv[0] if sys.argv else ""
        name = Path(argv0).stem if argv0 and not argv0.startswith("-") else ""
    except Exception:
        name = ""
    return name or UNNAMED_APP
