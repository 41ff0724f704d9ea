"""Allow ``python -m mcq_toolkit``."""

from mcq_toolkit.cli import main

raise SystemExit(main())
