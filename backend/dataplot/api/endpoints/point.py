"""Demo endpoint exposing the shared point."""

from typing import Optional

from fastapi import APIRouter, Form, Request
from fastapi.responses import PlainTextResponse

from dataplot.point import PointResource, describe_point, parse_form_float

router = APIRouter(tags=["point"])


def _point(request: Request) -> PointResource:
    return request.app.state.point


@router.get("/point", response_class=PlainTextResponse)
async def bump_point(request: Request):
    """Increment x and report the point."""
    point = _point(request)
    return describe_point(*point.increment())


@router.post("/point", response_class=PlainTextResponse)
async def set_point(
    request: Request,
    x: Optional[str] = Form(None),
    y: Optional[str] = Form(None),
):
    """Replace the point with the submitted coordinates."""
    point = _point(request)
    return describe_point(*point.set(parse_form_float(x), parse_form_float(y)))
