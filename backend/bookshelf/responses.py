"""
Bookshelf Backend: JSON Response Classes
===========================================

What:  JSONResponse variant that pretty-prints its body.
Who:   Installed as the app's default_response_class in main.py, so every
       successful route response is indented. Error handlers build plain
       JSONResponse objects and stay compact.
"""

import json
from typing import Any

from starlette.responses import JSONResponse

from bookshelf.config import settings


class IndentedJSONResponse(JSONResponse):
    """JSON body indented by `settings.json_indent` spaces (compact when 0)."""

    def render(self, content: Any) -> bytes:
        indent = settings.json_indent or None
        if indent is None:
            return super().render(content)
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=indent,
        ).encode("utf-8")
