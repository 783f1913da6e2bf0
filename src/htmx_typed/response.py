"""
FastAPI response helpers.

Thin adapter that attaches :class:`~htmx_typed.headers.HxHeader` values to
an ``HTMLResponse``. Header transport itself is left to Starlette.
"""

from __future__ import annotations

from fastapi.responses import HTMLResponse

from htmx_typed.headers import HxHeader, headers_dict


def htmx_response(
    content: str,
    *headers: HxHeader,
    status_code: int = 200,
) -> HTMLResponse:
    """Create an HTMLResponse carrying HTMX response headers.

    Args:
        content: HTML body content.
        *headers: HX-* headers built with :mod:`htmx_typed.headers`.
            Headers with an empty value (e.g. a trigger with no events)
            are omitted.
        status_code: HTTP status code (default 200).

    Returns:
        HTMLResponse with the HX-* headers set.
    """
    return HTMLResponse(
        content=content,
        status_code=status_code,
        headers=headers_dict(*headers),
    )


def apply_headers(response: HTMLResponse, *headers: HxHeader) -> HTMLResponse:
    """Add HX-* headers to an existing response and return it."""
    for name, value in headers_dict(*headers).items():
        response.headers[name] = value
    return response
