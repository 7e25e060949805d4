"""Entry point: python -m fixture_tree"""

from __future__ import annotations

from fixture_tree.cli import run

if __name__ == "__main__":
    run()
