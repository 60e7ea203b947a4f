import logging
from mcp.server.fastmcp import FastMCP
from config import (
    DEFAULT_APP_URL,
    DEFAULT_ENV,
    ENV_URLS,
    HttpSettings,
    resolve_config,
)

# Initialize FastMCP server
mcp = FastMCP("karate-env")


def format_timeout(milliseconds: int | None) -> str:
    """Format a timeout setting for display"""
    if milliseconds is None:
        return "not set"
    return f"{milliseconds} ms"


@mcp.tool()
async def resolve_environment(env: str = "") -> str:
    """Show the base URL and HTTP timeouts a test run would use.

    Args:
        env: Environment name (e.g., dev, test, karate, karate-admin). Empty means dev.
    """
    # Resolve into private settings so the shared client state is untouched
    settings = HttpSettings()
    app_config = resolve_config(env, settings=settings)

    resolved = env or DEFAULT_ENV
    result = [
        "=== Environment ===",
        f"Requested: {env or '(not set)'}",
        f"Resolved: {resolved}",
    ]
    if resolved not in ENV_URLS:
        result.append("(Unknown environment, using default URL)")

    result.extend([
        "",
        f"App URL: {app_config.app_url}",
        f"Connect timeout: {format_timeout(settings.connect_timeout)}",
        f"Read timeout: {format_timeout(settings.read_timeout)}",
    ])

    return "\n".join(result)


@mcp.tool()
async def list_environments() -> str:
    """List the known environments and their base URLs."""
    result = [f"Environment count: {len(ENV_URLS)}", "", "Environments:"]
    for name, url in ENV_URLS.items():
        result.append(f"  - {name}: {url}")

    result.append("")
    result.append(f"Default URL: {DEFAULT_APP_URL}")

    return "\n".join(result)


def main():
    logging.basicConfig(level=logging.INFO)
    # Run MCP server with stdio transport
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
