#!/usr/bin/env python3
"""
Runner script for the image filter tool.
This makes it easy to run the tool with uv: uv run python run.py <folder>
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))
from image_filter_tool.main import cli

if __name__ == "__main__":
    cli()
