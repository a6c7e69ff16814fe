#!/usr/bin/env python3
"""
print a fresh five-word passphrase.

usage:
    python scripts/generate_password.py
    python scripts/generate_password.py --words 6 --delimiter -

same as the installed `wordpass` command.
"""

import sys
from pathlib import Path

# add parent dir to path so we can import wordpass
sys.path.insert(0, str(Path(__file__).parent.parent))

from wordpass.cli import main


if __name__ == "__main__":
    sys.exit(main())
