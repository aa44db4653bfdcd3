"""
MCP Server for Fitbit Data

Provides tools to read profile, device, activity, body and nutrition
data from the Fitbit Web API via the Model Context Protocol (MCP).

Requests are signed with OAuth 1.0a credentials taken from the
FITBIT_* environment variables (see client_factory).

Supports two transport modes:
- stdio: For single-user local usage (default)
- http: For HTTP server deployment
"""

import logging
import os

from fastmcp import FastMCP

from fitbit_mcp import profile
from fitbit_mcp import activity
from fitbit_mcp import body
from fitbit_mcp import nutrition

logging.basicConfig(level=logging.INFO)


def create_app() -> FastMCP:
    """Create and configure the MCP app with all tools registered."""
    app = FastMCP("Fitbit v1.0")

    # Register user tools (profile, devices, friends, feature list)
    app = profile.register_tools(app)

    # Register time series tools
    app = activity.register_tools(app)

    # Register body tools
    app = body.register_tools(app)

    # Register nutrition tools
    app = nutrition.register_tools(app)

    return app


def main():
    """Initialize the MCP server and run with configured transport.

    Environment variables:
    - MCP_TRANSPORT: 'stdio' (default) or 'http'
    - MCP_HOST: Host to bind to (default: '0.0.0.0')
    - MCP_PORT: Port for HTTP transport (default: 8081)
    """
    app = create_app()

    transport = os.environ.get("MCP_TRANSPORT", "stdio")

    if transport == "http":
        host = os.environ.get("MCP_HOST", "0.0.0.0")
        port = int(os.environ.get("MCP_PORT", "8081"))
        app.run(transport="http", host=host, port=port)
    else:
        app.run()


if __name__ == "__main__":
    main()
