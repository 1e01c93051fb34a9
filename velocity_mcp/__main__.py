import sys

from velocity_mcp.cli import main

sys.exit(main())
