#!/usr/bin/env python3
"""
TextForge - text case and cleanup transformations

Simple usage:
    python forge.py transform "Hello World" --mode snakecase
    echo "some text" | python forge.py transform -m titlecase
    python forge.py modes                # List transformation modes
    python forge.py session --auto       # Interactive session
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from textforge.cli import app

if __name__ == "__main__":
    app()
