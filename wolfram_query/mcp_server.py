from fastmcp import FastMCP

from wolfram_query.exceptions import ConfigurationError
from wolfram_query.services import wolfram as wolfram_service

mcp = FastMCP("Wolfram Query")


def _handle_mcp_error(e: ConfigurationError) -> dict:
    """Convert a configuration error to an agent-friendly error dict."""
    return {
        "error": "configuration_error",
        "message": str(e),
        "action": "Ask the operator to set WOLFRAM_APP_ID and restart the server",
    }


@mcp.tool
def wolfram_query(input: str) -> dict:
    """Ask Wolfram Alpha a math, science or factual question (e.g. 'integrate x^2', 'population of France').
    Returns {"success": true, "data": {...}} with the result pods, including step-by-step solutions when available,
    or {"success": false, "error": "..."} when the query could not be answered."""
    try:
        return wolfram_service.query(input).model_dump()
    except ConfigurationError as e:
        return _handle_mcp_error(e)
