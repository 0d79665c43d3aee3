#!/usr/bin/env python3
"""
casemark - structured-text compiler for case-analysis documents

Simple usage:
    python casemark_dev.py render ruling.md                 # HTML on stdout
    python casemark_dev.py render ruling.md --format text   # Plain text
    python casemark_dev.py highlight analysis.json          # Coloured JSON
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from casemark.cli import app

if __name__ == "__main__":
    app()
