from __future__ import annotations

from filesize.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
