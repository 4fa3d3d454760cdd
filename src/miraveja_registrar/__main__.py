import sys

from miraveja_registrar.infrastructure.cli import main

if __name__ == "__main__":
    sys.exit(main())
