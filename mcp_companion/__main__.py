"""Entry point: python -m mcp_companion"""

from mcp_companion.cli.commands import app

if __name__ == "__main__":
    app()
