"""
CLARA Generation Pipeline Module

This module contains the two operations behind the CLARA visual mnemonic app:
generating a new scene from a medical topic and editing an existing scene from
a natural-language instruction.

Scene Generator (generate_scene):
    1. Plan Scene (plan_scene)
       - Input: topic
       - Output: ScenePlan (title, scene_prompt, explanation_points)
       - Reasoning call with a JSON response schema; incomplete payloads are fatal
    2. Render Image (render_image)
       - Input: scene_prompt, style
       - Output: data URI of one 16:9 JPEG
       - Prompt = scene_prompt + style suffix + zero-text suffix

Scene Editor (edit_scene):
    1. Integrate Edit (integrate_edit), context-aware mode only
       - Input: SceneContext (title, explanation_points), instruction
       - Output: EditIntegration (edit_prompt, new_explanation_point)
    2. Apply Edit (apply_edit)
       - Input: decoded image bytes + MIME type, edit directive
       - Output: EditResult (image_data, model_note)
       - Requests IMAGE + TEXT modalities; the first inline image part wins

In context-free mode the raw instruction is the edit directive and no
explanation point is produced.

Every failure raises GenerationError or EditError; there is no retry.

Usage:
    from clara import MnemonicScenePipeline

    pipeline = MnemonicScenePipeline(api_key="your_key")
    scene = pipeline.generate_scene("Listeria monocytogenes", "Cartoon")
    edit = pipeline.edit_scene(scene.image_data, "Add nafcillin", scene.context())
    scene = scene.with_edit(edit)
"""

from typing import Any, Optional

from google import genai
from google.genai import types
from pydantic import ValidationError

from . import prompts
from .config import Settings, load_settings
from .errors import EditError, GenerationError
from .image_utils import bytes_to_data_uri, decode_image_payload, parse_data_uri
from .logger import get_logger
from .schemas import (
    EditIntegration,
    EditRequest,
    EditResult,
    SceneContext,
    ScenePlan,
    SceneRequest,
    SceneResult,
)

logger = get_logger(__name__)


class MnemonicScenePipeline:
    """
    Scene generator and editor over the Gemini API.

    Attributes:
        settings (Settings): Model names and credential
        client (genai.Client): Gemini API client (injectable for tests)

    Methods:
        generate_scene(): Topic + style -> SceneResult
        edit_scene(): Image + instruction (+ context) -> EditResult
        generate() / edit(): Same, from SceneRequest / EditRequest objects

    Example:
        >>> pipeline = MnemonicScenePipeline()
        >>> scene = pipeline.generate_scene("Listeria monocytogenes", "Cartoon")
        >>> print(scene.title)
    """

    def __init__(self, api_key: Optional[str] = None, settings: Optional[Settings] = None, client: Any = None):
        self.settings = settings or load_settings()
        if api_key:
            self.settings = self.settings.model_copy(update={"api_key": api_key})
        if client is None:
            if not self.settings.api_key:
                raise ValueError("GEMINI_API_KEY not found in environment or passed to constructor")
            client = genai.Client(api_key=self.settings.api_key)
        self.client = client

    # --- Scene Generator ---

    def generate(self, request: SceneRequest) -> SceneResult:
        return self.generate_scene(request.topic, request.style)

    def generate_scene(self, topic: str, style: Optional[str]) -> SceneResult:
        if not topic or not topic.strip():
            raise GenerationError("Please enter a medical topic first.")

        plan = self.plan_scene(topic)
        image_data = self.render_image(plan.scene_prompt, style)
        return SceneResult(
            title=plan.title,
            explanation_points=plan.explanation_points,
            image_data=image_data,
        )

    def plan_scene(self, topic: str) -> ScenePlan:
        logger.info(f"Planning scene with {self.settings.text_model} ({len(topic)} chars of topic)")
        try:
            response = self.client.models.generate_content(
                model=self.settings.text_model,
                contents=topic,
                config=types.GenerateContentConfig(
                    system_instruction=prompts.SCENE_PLAN_SYSTEM_INSTRUCTION,
                    response_mime_type="application/json",
                    response_schema=ScenePlan,
                ),
            )
        except Exception as e:
            raise GenerationError(f"Scene planning request failed: {e}") from e

        if not response.text:
            raise GenerationError("Failed to generate scene details from the text model.")
        try:
            return ScenePlan.model_validate_json(response.text)
        except ValidationError as e:
            logger.warning(f"Incomplete scene plan payload: {e.error_count()} problem(s)")
            raise GenerationError("Failed to generate scene details from the text model.") from e

    def render_image(self, scene_prompt: str, style: Optional[str]) -> str:
        full_prompt = prompts.build_image_prompt(scene_prompt, style)
        logger.info(
            f"Generating image with {self.settings.image_model} "
            f"(style '{prompts.resolve_style(style)}', {len(full_prompt)} chars of prompt)"
        )
        try:
            response = self.client.models.generate_images(
                model=self.settings.image_model,
                prompt=full_prompt,
                config=types.GenerateImagesConfig(
                    number_of_images=prompts.IMAGE_COUNT,
                    output_mime_type=prompts.IMAGE_MIME_TYPE,
                    aspect_ratio=prompts.IMAGE_ASPECT_RATIO,
                ),
            )
        except Exception as e:
            raise GenerationError(f"Image generation request failed: {e}") from e

        generated = response.generated_images or []
        image = generated[0].image if generated else None
        if image is None or not image.image_bytes:
            raise GenerationError("Failed to generate image.")
        return bytes_to_data_uri(image.mime_type or prompts.IMAGE_MIME_TYPE, image.image_bytes)

    # --- Scene Editor ---

    def edit(self, request: EditRequest) -> EditResult:
        return self.edit_scene(request.image_data, request.instruction, request.context)

    def edit_scene(self, image_data: str, instruction: str, context: Optional[SceneContext] = None) -> EditResult:
        if not instruction or not instruction.strip():
            raise EditError("Please describe the edit first.")

        mime_type, payload = parse_data_uri(image_data)
        if not mime_type or not payload:
            raise EditError("Invalid image data URI.")
        try:
            image_bytes = decode_image_payload(payload)
        except ValueError as e:
            raise EditError("Invalid image data URI.") from e

        if context is None:
            return self.apply_edit(mime_type, image_bytes, instruction.strip())

        integration = self.integrate_edit(context, instruction)
        result = self.apply_edit(mime_type, image_bytes, integration.edit_prompt)
        result.appended_explanation_point = integration.new_explanation_point
        return result

    def integrate_edit(self, context: SceneContext, instruction: str) -> EditIntegration:
        integration_prompt = prompts.get_integration_prompt(
            context.title, context.explanation_points, instruction
        )
        logger.info(f"Integrating edit with {self.settings.text_model} into '{context.title}'")
        try:
            response = self.client.models.generate_content(
                model=self.settings.text_model,
                contents=integration_prompt,
                config=types.GenerateContentConfig(
                    system_instruction=prompts.EDIT_INTEGRATION_SYSTEM_INSTRUCTION,
                    response_mime_type="application/json",
                    response_schema=EditIntegration,
                ),
            )
        except Exception as e:
            raise EditError(f"Edit integration request failed: {e}") from e

        if not response.text:
            raise EditError("Failed to generate integration details from the text model.")
        try:
            return EditIntegration.model_validate_json(response.text)
        except ValidationError as e:
            logger.warning(f"Incomplete edit integration payload: {e.error_count()} problem(s)")
            raise EditError("Failed to generate integration details from the text model.") from e

    def apply_edit(self, mime_type: str, image_bytes: bytes, edit_prompt: str) -> EditResult:
        directive = prompts.build_edit_directive(edit_prompt)
        logger.info(f"Editing image with {self.settings.edit_model} ({len(directive)} chars of directive)")
        try:
            response = self.client.models.generate_content(
                model=self.settings.edit_model,
                contents=[
                    types.Content(role="user", parts=[
                        types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
                        types.Part.from_text(text=directive),
                    ])
                ],
                config=types.GenerateContentConfig(
                    response_modalities=[types.Modality.IMAGE, types.Modality.TEXT],
                ),
            )
        except Exception as e:
            raise EditError(f"Image edit request failed: {e}") from e

        edited_image = None
        notes = []
        candidates = response.candidates or []
        content = candidates[0].content if candidates else None
        for part in (content.parts or []) if content else []:
            if part.inline_data and part.inline_data.data:
                if edited_image is None:
                    edited_image = bytes_to_data_uri(
                        part.inline_data.mime_type or "image/png", part.inline_data.data
                    )
            elif part.text:
                notes.append(part.text.strip())

        if edited_image is None:
            raise EditError("Failed to edit image. The model did not return an image.")

        model_note = "\n".join(n for n in notes if n) or None
        if model_note:
            logger.info(f"Model edit response: {model_note}")
        return EditResult(image_data=edited_image, model_note=model_note)
