"""
Scene state container.

Holds the current scene plus the busy / error flags shown in the UI. State only
changes through the six transitions below; a second operation cannot start
while one is in flight.

    start_generate -> complete_generate | fail_generate
    start_edit     -> complete_edit     | fail_edit
"""

from typing import Optional

from .schemas import EditResult, SceneResult

GENERATE = "generate"
EDIT = "edit"


class SceneState:

    def __init__(self):
        self.scene: Optional[SceneResult] = None
        self.busy: bool = False
        self.operation: Optional[str] = None
        self.error: Optional[str] = None
        self.model_note: Optional[str] = None

    @property
    def can_generate(self) -> bool:
        return not self.busy

    @property
    def can_edit(self) -> bool:
        return not self.busy and self.scene is not None

    def _begin(self, operation: str):
        if self.busy:
            raise RuntimeError(f"Cannot start {operation}: '{self.operation}' is still running")
        self.busy = True
        self.operation = operation
        self.error = None

    def _settle(self):
        self.busy = False
        self.operation = None

    def _expect(self, operation: str):
        if self.operation != operation:
            raise RuntimeError(f"No {operation} in progress")

    # --- Generation ---

    def start_generate(self):
        self._begin(GENERATE)
        # Displayed scene is cleared as soon as a new generation starts.
        self.scene = None
        self.model_note = None

    def complete_generate(self, result: SceneResult):
        self._expect(GENERATE)
        self.scene = result
        self._settle()

    def fail_generate(self, message: str):
        self._expect(GENERATE)
        self.scene = None
        self.error = message
        self._settle()

    # --- Editing ---

    def start_edit(self):
        if self.scene is None:
            raise RuntimeError("Cannot start edit: no scene has been generated")
        self._begin(EDIT)

    def complete_edit(self, result: EditResult):
        self._expect(EDIT)
        self.scene = self.scene.with_edit(result)
        self.model_note = result.model_note
        self._settle()

    def fail_edit(self, message: str):
        self._expect(EDIT)
        self.error = message
        self._settle()
