"""Permite ejecutar la CLI con `python -m quran_content`."""

from __future__ import annotations

import sys

# Workaround for UnicodeEncodeError on Windows terminals (cp1252 vs utf-8);
# chapter names include Arabic script.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from quran_content.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
