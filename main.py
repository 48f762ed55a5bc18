#!/usr/bin/env python3
"""
Entry point for running changelog-md from a source checkout.
"""
import sys
from pathlib import Path

# Add the src directory to the Python path
src_dir = Path(__file__).parent / 'src'
sys.path.insert(0, str(src_dir))


def main():
    from changelog_md.cli import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
