"""HTTP services for Church Agenda."""

from .server import app, invoke_api_function, list_api_functions, run_local_server

__all__ = [
    "app",
    "invoke_api_function",
    "list_api_functions",
    "run_local_server",
]
