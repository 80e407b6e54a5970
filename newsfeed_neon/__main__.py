"""Package command-line entrypoint.

Enables running the application with:

    python -m newsfeed_neon [path/to/config.json]

or, once installed (via the console-script declared in *pyproject.toml*), simply:

    newsfeed-neon
"""

from __future__ import annotations

import sys

from .main import main


def _run() -> None:  # pragma: no cover - thin wrapper
    """Invoke :pyfunc:`newsfeed_neon.main.main`."""

    main(sys.argv[1] if len(sys.argv) > 1 else None)


if __name__ == "__main__":  # pragma: no cover
    _run()
