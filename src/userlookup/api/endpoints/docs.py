"""API documentation endpoints (Swagger UI over the static OpenAPI document)."""

from fastapi import APIRouter
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse, JSONResponse

from ..openapi import OPENAPI_DOCUMENT

router = APIRouter()

OPENAPI_PATH = "/api-docs/openapi.json"


@router.get("/openapi.json", include_in_schema=False)
async def openapi_document() -> JSONResponse:
    return JSONResponse(OPENAPI_DOCUMENT)


@router.get("", include_in_schema=False)
async def swagger_ui() -> HTMLResponse:
    return get_swagger_ui_html(
        openapi_url=OPENAPI_PATH,
        title=f"{OPENAPI_DOCUMENT['info']['title']} - Swagger UI",
    )
