"""Allow ``python -m mdbook_compile_output``."""

import sys

from mdbook_compile_output.cli import main

if __name__ == "__main__":
    sys.exit(main())
