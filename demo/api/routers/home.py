"""Home endpoint.

Routes
------
GET /    — the static Hello World page
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from demo.pages import HOME_PAGE

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def home() -> HTMLResponse:
    """Return the Hello World page.

    The body never depends on the request, so every call is byte-identical.
    """
    return HTMLResponse(content=HOME_PAGE)
