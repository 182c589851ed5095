"""Allow ``python -m instafilter``."""

from .gui.main import main

if __name__ == "__main__":
    raise SystemExit(main())
