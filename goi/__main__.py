"""Allow ``python -m goi``."""

from goi.cli import main

raise SystemExit(main())
