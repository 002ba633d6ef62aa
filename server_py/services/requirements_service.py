"""Requirements bundle generation via the chat-completion service."""
from typing import Any, Dict, List, Optional

import httpx

from core.config import Settings
from core.logging import log_info, log_debug
from prompts import PromptLoader, prompt_loader
from schemas.requests_generate import GenerateRequest
from schemas.requirements_bundle import build_response_format
from utils.openai_llm import OpenAIConfig, call_chat_completion_async

PROMPT_FILE = "requirements.yml"

DEFAULT_TEXT = "N/A"
DEFAULT_DETAIL = "standard"


class RequirementsService:
    """Builds the prompt for a generate request and relays the model output."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        loader: Optional[PromptLoader] = None,
    ):
        self.settings = settings
        self.llm_config = OpenAIConfig.from_settings(settings)
        self._transport = transport
        self._prompts = loader or prompt_loader

    def build_user_text(self, request: GenerateRequest) -> str:
        template = self._prompts.get_prompt(PROMPT_FILE, "user")
        return template.format(
            figma_url=request.figmaUrl or DEFAULT_TEXT,
            brief=request.brief or DEFAULT_TEXT,
            detail=request.detail or DEFAULT_DETAIL,
            rules=request.rules or "",
        )

    def build_messages(self, request: GenerateRequest) -> List[Dict[str, Any]]:
        """Build the system and user messages; the image, if any, is a second user part."""
        user_content: List[Dict[str, Any]] = [
            {"type": "text", "text": self.build_user_text(request)},
        ]
        if request.imageDataUrl:
            user_content.append({
                "type": "image_url",
                "image_url": {"url": request.imageDataUrl},
            })

        return [
            {"role": "system", "content": self._prompts.get_prompt(PROMPT_FILE, "system")},
            {"role": "user", "content": user_content},
        ]

    def build_request_body(self, request: GenerateRequest) -> Dict[str, Any]:
        return {
            "model": request.model or self.llm_config.default_model,
            "messages": self.build_messages(request),
            "response_format": build_response_format(self.settings.schema_variant),
        }

    async def generate(self, request: GenerateRequest) -> str:
        """Call the completion service once and return its message content."""
        body = self.build_request_body(request)

        image_info = f"{len(request.imageDataUrl)} chars" if request.imageDataUrl else "none"
        log_info(
            f"Generating requirements bundle (model={body['model']}, "
            f"schema={self.settings.schema_variant}, image={image_info})",
            "requirements",
        )

        content = await call_chat_completion_async(
            body,
            self.llm_config,
            transport=self._transport,
        )
        log_debug(f"Completion content length: {len(content)} chars", "requirements")
        return content
