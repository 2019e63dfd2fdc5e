from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, field_validator


class ImageStyle(str, Enum):
    CARTOON = "Cartoon"
    REALISTIC = "Realistic"
    MINIMALIST = "Minimalist"
    SKETCHY = "Sketchy"


class EditMode(str, Enum):
    CONTEXT_AWARE = "context-aware"
    CONTEXT_FREE = "context-free"


def _require_text(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


# --- Reasoning Payloads (response_schema for the text model) ---

class ScenePlan(BaseModel):
    title: str
    scene_prompt: str
    explanation_points: List[str]

    @field_validator("title", "scene_prompt")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        return _require_text(v)

    @field_validator("explanation_points")
    @classmethod
    def _has_points(cls, v: List[str]) -> List[str]:
        points = [p.strip() for p in v if p and p.strip()]
        if not points:
            raise ValueError("must contain at least one explanation point")
        return points


class EditIntegration(BaseModel):
    edit_prompt: str
    new_explanation_point: str

    @field_validator("edit_prompt", "new_explanation_point")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        return _require_text(v)


# --- Requests / Results ---

class SceneRequest(BaseModel):
    topic: str
    style: str = ImageStyle.CARTOON.value


class SceneContext(BaseModel):
    """Title and explanation key of the current scene, handed to context-aware edits."""
    title: str
    explanation_points: List[str]


class SceneResult(BaseModel):
    title: str
    explanation_points: List[str]
    image_data: str  # data:<mime>;base64,<payload>

    def context(self) -> SceneContext:
        return SceneContext(title=self.title, explanation_points=list(self.explanation_points))

    def with_edit(self, edit: "EditResult") -> "SceneResult":
        """Returns a new scene with the edited image and, if present, the appended point.

        Prior points keep their order and content; the title is never changed.
        """
        points = list(self.explanation_points)
        if edit.appended_explanation_point:
            points.append(edit.appended_explanation_point)
        return SceneResult(title=self.title, explanation_points=points, image_data=edit.image_data)

    def key_text(self) -> str:
        lines = [self.title] + [f"* {p}" for p in self.explanation_points]
        return "\n".join(lines)


class EditRequest(BaseModel):
    image_data: str
    instruction: str
    context: Optional[SceneContext] = None


class EditResult(BaseModel):
    image_data: str
    appended_explanation_point: Optional[str] = None
    model_note: Optional[str] = None
