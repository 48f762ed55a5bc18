import sys

from changelog_md.cli import main

if __name__ == "__main__":
    sys.exit(main())
