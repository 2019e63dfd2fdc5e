import streamlit as st

from clara import EditMode, ImageStyle, MnemonicScenePipeline, SceneOrchestrator
from clara.config import load_settings
from clara.image_utils import data_uri_to_bytes, download_filename
from clara.logger import get_logger, setup_logging


def get_secret_api_key():
    # Streamlit secrets (Cloud / .streamlit/secrets.toml) win over the environment
    try:
        if hasattr(st, "secrets") and "GEMINI_API_KEY" in st.secrets:
            return st.secrets["GEMINI_API_KEY"]
    except Exception:
        # Secrets file not found, will fall back to the environment
        pass
    return None


settings = load_settings(get_secret_api_key())
setup_logging(settings.log_level)
logger = get_logger("app")

STYLES = [s.value for s in ImageStyle]
EDIT_MODES = {
    EditMode.CONTEXT_AWARE: "Integrate into the key (context-aware)",
    EditMode.CONTEXT_FREE: "Edit image only (context-free)",
}


# Initialize Pipeline
@st.cache_resource
def get_pipeline():
    return MnemonicScenePipeline(settings=settings)


def get_orchestrator() -> SceneOrchestrator:
    if "orchestrator" not in st.session_state:
        st.session_state["orchestrator"] = SceneOrchestrator(get_pipeline(), edit_mode=settings.edit_mode)
    return st.session_state["orchestrator"]


# Page config
st.set_page_config(
    page_title="CLARA AI Mnemonics",
    page_icon="🧠",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown("""
<style>
    .main-title {
        font-size: 2.6rem !important;
        font-weight: 800;
        text-align: center;
        margin-bottom: 1.5rem;
    }
    .key-card {
        background: #fffbea;
        border: 1px solid #f5e3a3;
        color: #3b3200;
        padding: 1rem 1.25rem;
        border-radius: 12px;
    }
</style>
""", unsafe_allow_html=True)

orchestrator = get_orchestrator()
state = orchestrator.state

if "edit_text" not in st.session_state:
    st.session_state["edit_text"] = ""


def on_generate():
    topic = st.session_state.get("medical_text", "")
    style = st.session_state.get("style", settings.default_style)
    with st.spinner("Generating Mnemonic... This might take a minute."):
        ok = orchestrator.generate(topic, style)
    if ok:
        # New scene, stale edit request
        st.session_state["edit_text"] = ""


def on_edit():
    instruction = st.session_state.get("edit_text", "")
    mode = st.session_state.get("edit_mode", settings.edit_mode)
    with st.spinner("Updating the scene..."):
        orchestrator.edit(instruction, mode)
    st.session_state["edit_text"] = ""


# Sidebar
with st.sidebar:
    st.header("Settings")
    st.selectbox(
        "🎨 Visual Style",
        STYLES,
        index=STYLES.index(settings.default_style) if settings.default_style in STYLES else 0,
        key="style",
    )
    st.radio(
        "✏️ Edit Mode",
        list(EDIT_MODES.keys()),
        index=list(EDIT_MODES.keys()).index(settings.edit_mode),
        format_func=lambda m: EDIT_MODES[m],
        key="edit_mode",
    )
    st.divider()
    st.info("CLARA uses Gemini to plan the scene and Imagen to draw it. Nothing is stored.")

# Main UI
st.markdown('<h1 class="main-title">🧠 CLARA AI Visual Mnemonics</h1>', unsafe_allow_html=True)

col_controls, col_canvas = st.columns([1, 2])

with col_controls:
    st.subheader("1. Describe the topic")
    st.text_area(
        "Enter Medical Topic / Facts",
        placeholder="e.g. Listeria monocytogenes",
        height=140,
        key="medical_text",
    )
    st.button(
        "✨ Generate Mnemonic",
        on_click=on_generate,
        disabled=not state.can_generate,
        type="primary",
    )

    st.subheader("2. Refine the scene")
    st.text_area(
        "Describe a change",
        placeholder="e.g. Add something for ampicillin treatment",
        height=100,
        key="edit_text",
        disabled=not state.can_edit,
    )
    st.button("🖌️ Apply Edit", on_click=on_edit, disabled=not state.can_edit)

with col_canvas:
    if state.error:
        st.error(f"**An Error Occurred**\n\n{state.error}")

    scene = state.scene
    if scene is None:
        if not state.error:
            st.info("Your visual mnemonic will appear here once generated.")
    else:
        mime_type, image_bytes = data_uri_to_bytes(scene.image_data)
        st.image(image_bytes, width="stretch")

        if state.model_note:
            st.caption(f"Model note: {state.model_note}")

        key_md = "\n".join(f"- {point}" for point in scene.explanation_points)
        st.markdown(f"### 🔑 {scene.title}")
        st.markdown(f'<div class="key-card">\n\n{key_md}\n\n</div>', unsafe_allow_html=True)

        col_dl1, col_dl2 = st.columns(2)
        with col_dl1:
            st.download_button(
                "⬇️ Download Image",
                data=image_bytes,
                file_name=download_filename(scene.title, mime_type),
                mime=mime_type,
            )
        with col_dl2:
            st.download_button(
                "⬇️ Download Key",
                data=scene.key_text(),
                file_name=download_filename(scene.title, suffix="-key.md"),
                mime="text/markdown",
            )
