"""Run the command line program with ``python -m cubic``."""

from cubic.cli import main

raise SystemExit(main())
