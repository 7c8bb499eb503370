import sys

from mcpxml.main import main

if __name__ == "__main__":
    sys.exit(main())
