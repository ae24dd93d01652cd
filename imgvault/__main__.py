import sys

from imgvault.cli import main

if __name__ == "__main__":
    sys.exit(main())
