"""Main entry point for the metacog MCP server.

With any command-line argument, prints a short help text and exits.
Without arguments, serves the tools over stdio until the client disconnects.
"""

import asyncio
import sys
from typing import Optional, Sequence

from .errors import TransportFailureError
from .server import create_server

HELP_TEXT = """Metacognitive tools for LLMs. Six primitives: feeling, substrate, identity, naming, ritual, prayer.

This is an MCP server using stdio transport. Connect it to an MCP client:
  claude mcp add --scope user metacog -- metacog"""


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI.

    Args:
        argv: Command-line arguments, excluding the program name
              (default: ``sys.argv[1:]``)

    Returns:
        Process exit status
    """
    if argv is None:
        argv = sys.argv[1:]

    if argv:
        print(HELP_TEXT)
        return 0

    try:
        server = create_server()
        asyncio.run(server.start())
    except KeyboardInterrupt:
        print("\nServer interrupted by user", file=sys.stderr)
        return 0
    except (TransportFailureError, ValueError) as e:
        print(f"Server failed: {e}", file=sys.stderr)
        return 1
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
