"""
Scene orchestrator: the error boundary between the UI and the pipeline.

Runs one generate or edit operation through the SceneState transitions,
converts failures into the message shown in the error banner and logs them.
Nothing raised by the pipeline escapes to the caller.
"""

from typing import Optional

from .errors import EditError, GenerationError
from .logger import get_logger
from .pipeline import MnemonicScenePipeline
from .schemas import EditMode, EditRequest, SceneRequest
from .state import SceneState

logger = get_logger(__name__)

UNKNOWN_GENERATION_ERROR = "An unknown error occurred during generation."
UNKNOWN_EDIT_ERROR = "An unknown error occurred during editing."


class SceneOrchestrator:

    def __init__(self, pipeline: MnemonicScenePipeline, state: Optional[SceneState] = None,
                 edit_mode: EditMode = EditMode.CONTEXT_AWARE):
        self.pipeline = pipeline
        self.state = state or SceneState()
        self.edit_mode = edit_mode

    def generate(self, topic: str, style: str) -> bool:
        request = SceneRequest(topic=topic, style=style)
        self.state.start_generate()
        try:
            result = self.pipeline.generate(request)
        except GenerationError as e:
            logger.error(f"Generation failed for topic '{topic[:40]}': {e}")
            self.state.fail_generate(str(e))
            return False
        except Exception:
            logger.exception(f"Unexpected error while generating '{topic[:40]}'")
            self.state.fail_generate(UNKNOWN_GENERATION_ERROR)
            return False

        logger.info(f"Generated '{result.title}' with {len(result.explanation_points)} explanation points")
        self.state.complete_generate(result)
        return True

    def edit(self, instruction: str, mode: Optional[EditMode] = None) -> bool:
        mode = mode or self.edit_mode
        self.state.start_edit()
        scene = self.state.scene
        try:
            request = EditRequest(
                image_data=scene.image_data,
                instruction=instruction,
                context=scene.context() if mode == EditMode.CONTEXT_AWARE else None,
            )
            result = self.pipeline.edit(request)
        except EditError as e:
            logger.error(f"Edit failed ({mode.value}): {e}")
            self.state.fail_edit(str(e))
            return False
        except Exception:
            logger.exception(f"Unexpected error while editing ({mode.value})")
            self.state.fail_edit(UNKNOWN_EDIT_ERROR)
            return False

        self.state.complete_edit(result)
        return True
