"""Allow ``python -m a11yscore``."""

from __future__ import annotations

from a11yscore.cli.main import main

raise SystemExit(main())
