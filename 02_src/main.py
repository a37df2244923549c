"""Main entry point: regenerate positron_events/models/events.py from the schema."""

import sys

from positron_events.codegen.cli import main

if __name__ == "__main__":
    sys.exit(main())
