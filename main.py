#!/usr/bin/env python3
"""
main.py — Quick-start entry point.

    python main.py photo.jpg tiles/

Or use the full CLI:

    python -m tile_mosaic.cli --help
    python -m tile_mosaic.cli photo.jpg tiles/ -o output/mosaic.png
"""

from tile_mosaic.cli import app

if __name__ == "__main__":
    app()
