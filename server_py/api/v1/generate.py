"""Requirements bundle generation API router."""
import json
from typing import Any

from fastapi import APIRouter, Depends, Request

from core.config import get_settings
from core.logging import log_info, log_error
from schemas.requests_generate import GenerateRequest
from services.requirements_service import RequirementsService
from utils.exceptions import UpstreamServiceError
from utils.response import json_text_response, error_text_response, method_not_allowed

router = APIRouter(tags=["generate"])

# Every method is routed here so the handler itself answers non-POST with 405
ROUTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def get_requirements_service() -> RequirementsService:
    """Dependency that builds the service from the current settings."""
    return RequirementsService(get_settings())


async def _read_json_body(request: Request) -> Any:
    raw = await request.body()
    if not raw.strip():
        return {}
    return json.loads(raw)


@router.api_route("/generate", methods=ROUTED_METHODS)
async def generate_requirements(
    request: Request,
    service: RequirementsService = Depends(get_requirements_service),
):
    """Generate user stories, tests, a UI data model and a validation report."""
    try:
        if request.method != "POST":
            return method_not_allowed()

        payload = await _read_json_body(request)
        generate_request = GenerateRequest.model_validate(payload)

        content = await service.generate(generate_request)

        log_info(f"Requirements bundle generated ({len(content)} chars)", "generate")
        return json_text_response(content)

    except UpstreamServiceError as e:
        log_error(f"OpenAI returned {e.status_code}", "generate")
        return error_text_response(f"OpenAI error: {e.body}")
    except Exception as e:
        log_error("Error generating requirements bundle", "generate", e)
        return error_text_response(f"Server error: {e}")
