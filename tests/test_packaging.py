"""Tests for declared dependency floors."""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def test_streamlit_floor_supports_stretch_width():
    # app.py renders the scene with st.image(..., width="stretch"), added in 1.49
    with open(PYPROJECT, "rb") as f:
        dependencies = tomllib.load(f)["project"]["dependencies"]
    streamlit = [d for d in dependencies if d.startswith("streamlit")]
    assert streamlit == ["streamlit>=1.49"]
