"""
CLARA - AI Visual Mnemonics for Medical Students

This package turns a short medical text into an AI-generated visual mnemonic
(one image plus a title and an explanation key) and lets the user evolve the
image with natural-language edits, using Google's Gemini and Imagen models.
It includes:

- Pipeline: scene generation (plan -> image) and scene editing (integrate -> edit)
- Prompts: System instructions, style suffixes, zero-text directives, model names
- State / Orchestrator: UI state transitions and the error boundary
- Schemas: Pydantic models for requests, reasoning payloads and results

Main exports:
    - MnemonicScenePipeline: Generator and editor over the Gemini API
    - SceneOrchestrator: Runs one operation at a time against a SceneState
    - SceneState: Current scene with busy / error flags
    - SceneResult, EditResult, SceneContext: Data models
    - GenerationError, EditError: Failures surfaced to the user

Usage:
    from clara import MnemonicScenePipeline, SceneOrchestrator

    orchestrator = SceneOrchestrator(MnemonicScenePipeline())
    orchestrator.generate("Listeria monocytogenes", "Cartoon")
    orchestrator.edit("Add something for ampicillin treatment")
"""

from .errors import EditError, GenerationError, MnemonicError
from .orchestrator import SceneOrchestrator
from .pipeline import MnemonicScenePipeline
from .schemas import (
    EditMode,
    EditRequest,
    EditResult,
    ImageStyle,
    SceneContext,
    SceneRequest,
    SceneResult,
)
from .state import SceneState

__all__ = [
    "MnemonicScenePipeline",
    "SceneOrchestrator",
    "SceneState",
    "SceneRequest",
    "SceneResult",
    "SceneContext",
    "EditRequest",
    "EditResult",
    "EditMode",
    "ImageStyle",
    "MnemonicError",
    "GenerationError",
    "EditError",
]

__version__ = "0.1.0"
