"""``python -m hello_devops`` behaves exactly like the ``hello-devops`` script."""

from __future__ import annotations

from .entry import main

if __name__ == "__main__":
    raise SystemExit(main())
