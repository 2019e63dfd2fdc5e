"""Tests for the SceneState transitions."""

import pytest

from clara.schemas import EditResult, SceneResult
from clara.state import SceneState


def make_scene(points=("first", "second")):
    return SceneResult(title="Tomb", explanation_points=list(points), image_data="data:image/jpeg;base64,AAAA")


class TestGenerateTransitions:

    def test_start_sets_busy_and_clears(self):
        state = SceneState()
        state.scene = make_scene()
        state.error = "old"
        state.start_generate()
        assert state.busy
        assert state.scene is None
        assert state.error is None
        assert not state.can_generate
        assert not state.can_edit

    def test_complete(self):
        state = SceneState()
        state.start_generate()
        state.complete_generate(make_scene())
        assert not state.busy
        assert state.scene.title == "Tomb"
        assert state.can_edit

    def test_fail_clears_scene(self):
        state = SceneState()
        state.scene = make_scene()
        state.start_generate()
        state.fail_generate("boom")
        assert state.scene is None
        assert state.error == "boom"
        assert not state.busy

    def test_no_overlap(self):
        state = SceneState()
        state.start_generate()
        with pytest.raises(RuntimeError):
            state.start_generate()

    def test_complete_without_start(self):
        with pytest.raises(RuntimeError):
            SceneState().complete_generate(make_scene())


class TestEditTransitions:

    def test_edit_requires_scene(self):
        state = SceneState()
        assert not state.can_edit
        with pytest.raises(RuntimeError):
            state.start_edit()

    def test_edit_blocked_while_generating(self):
        state = SceneState()
        state.scene = make_scene()
        state.start_generate()
        with pytest.raises(RuntimeError):
            state.start_edit()

    def test_complete_appends_one_point(self):
        state = SceneState()
        state.scene = make_scene()
        before = list(state.scene.explanation_points)

        state.start_edit()
        state.complete_edit(EditResult(
            image_data="data:image/png;base64,BBBB",
            appended_explanation_point="third",
            model_note="done",
        ))

        assert state.scene.explanation_points == before + ["third"]
        assert state.scene.title == "Tomb"
        assert state.scene.image_data == "data:image/png;base64,BBBB"
        assert state.model_note == "done"
        assert not state.busy

    def test_complete_without_point_keeps_key(self):
        state = SceneState()
        state.scene = make_scene()
        state.start_edit()
        state.complete_edit(EditResult(image_data="data:image/png;base64,BBBB"))
        assert state.scene.explanation_points == ["first", "second"]

    def test_fail_keeps_scene(self):
        state = SceneState()
        original = make_scene()
        state.scene = original
        state.start_edit()
        state.fail_edit("no image")
        assert state.scene is original
        assert state.scene.image_data == "data:image/jpeg;base64,AAAA"
        assert state.scene.explanation_points == ["first", "second"]
        assert state.error == "no image"
        assert state.can_edit

    def test_with_edit_does_not_mutate_previous_scene(self):
        scene = make_scene()
        edited = scene.with_edit(EditResult(image_data="data:image/png;base64,BBBB", appended_explanation_point="x"))
        assert scene.explanation_points == ["first", "second"]
        assert edited.explanation_points == ["first", "second", "x"]

    def test_key_text(self):
        assert make_scene().key_text() == "Tomb\n* first\n* second"
