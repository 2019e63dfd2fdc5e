import base64
import json
from types import SimpleNamespace

import pytest

from clara.config import Settings
from clara.pipeline import MnemonicScenePipeline
from clara.schemas import SceneResult

JPEG_BYTES = b"\xff\xd8\xff\xe0fake-jpeg"
PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-png"

LISTERIA_PLAN = {
    "title": "The Listeria Ice Cream Factory",
    "scene_prompt": "A chilly ice cream factory where General Lister rockets upwards. "
                    "The image must contain ZERO text, ZERO letters, ZERO numbers.",
    "explanation_points": [
        "General Lister in the cold factory: grows at refrigerator temperatures.",
        "Rocket-powered action figure: tumbling motility.",
        "Thick purple coat: Gram-positive.",
    ],
}

NAFCILLIN_INTEGRATION = {
    "edit_prompt": "Put a solid gold pencil in the hand of General Lister.",
    "new_explanation_point": "Golden Pencil ('Pen'-cillin): penicillins treat the infection.",
}


def text_response(payload):
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return SimpleNamespace(text=text)


def images_response(*images):
    return SimpleNamespace(generated_images=[
        SimpleNamespace(image=SimpleNamespace(image_bytes=data, mime_type="image/jpeg")) for data in images
    ])


def image_part(data=PNG_BYTES, mime_type="image/png"):
    return SimpleNamespace(inline_data=SimpleNamespace(data=data, mime_type=mime_type), text=None)


def text_part(text):
    return SimpleNamespace(inline_data=None, text=text)


def parts_response(*parts):
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=list(parts)))])


class FakeModels:
    """Stands in for ``client.models``; replays queued responses and records calls."""

    def __init__(self):
        self.content_responses = []
        self.image_responses = []
        self.calls = []

    def generate_content(self, **kwargs):
        self.calls.append(("generate_content", kwargs))
        response = self.content_responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def generate_images(self, **kwargs):
        self.calls.append(("generate_images", kwargs))
        response = self.image_responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakeClient:
    def __init__(self):
        self.models = FakeModels()


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def pipeline(fake_client):
    return MnemonicScenePipeline(settings=Settings(api_key="test-key"), client=fake_client)


@pytest.fixture
def scene():
    return SceneResult(
        title=LISTERIA_PLAN["title"],
        explanation_points=list(LISTERIA_PLAN["explanation_points"]),
        image_data="data:image/jpeg;base64," + base64.b64encode(JPEG_BYTES).decode("ascii"),
    )
