from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from weatherapp.api.deps import get_templates
from weatherapp.schemas.forms import CoordinateFormResult, validate_coordinate_form


router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def coordinate_form(request: Request, templates: Jinja2Templates = Depends(get_templates)):
    return templates.TemplateResponse(
        request,
        "index.html",
        {"form": {"latitude": "", "longitude": "", "time": ""}, "result": CoordinateFormResult()},
    )


@router.post("/", response_class=HTMLResponse)
async def submit_coordinates(
    request: Request,
    latitude: str = Form(""),
    longitude: str = Form(""),
    time: str = Form(""),
    templates: Jinja2Templates = Depends(get_templates),
):
    result = validate_coordinate_form(latitude, longitude, time)
    if result.coordinates is not None:
        return RedirectResponse(result.coordinates.path, status_code=302)

    return templates.TemplateResponse(
        request,
        "index.html",
        {"form": {"latitude": latitude, "longitude": longitude, "time": time}, "result": result},
    )
