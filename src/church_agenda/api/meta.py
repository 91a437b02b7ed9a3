from __future__ import annotations

from typing import Dict, List

from .registry import get_api_functions, register_api


@register_api(
    "list_available_tools",
    description="List all registered API functions with descriptions, categories, and parameters.",
    category="meta",
    tags=("tools", "metadata"),
)
def list_available_tools() -> Dict[str, List[dict]]:
    tools = [func.describe() for func in sorted(get_api_functions(), key=lambda item: item.name)]
    return {"tools": tools}
