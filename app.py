# app.py
from pathlib import Path
import sys
import importlib
import logging
import streamlit as st

# ==== Paths & sys.path ====
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.config import load_config  # noqa: E402
from core.errors import ConfigurationError  # noqa: E402
from core.logging_utils import setup_logging  # noqa: E402

# ==== Streamlit ====
st.set_page_config(
    page_title="VLabsPassKit",
    page_icon="🔑",
    layout="wide",
)

try:
    _cfg = load_config()
except ConfigurationError as e:
    st.error(f"Cấu hình không hợp lệ: {e}")
    st.stop()
setup_logging(_cfg.log_level, _cfg.log_file)
logger = logging.getLogger("vlabs.app")

# ==== Import các trang sau khi đã config ====
required_modules = {
    "mainwindow_page": "🏠 Home",
    "encryption_page": "🔐 Password",
    "system_page":     "🖥️ System",
}

PAGES = {}
errors = []

for mod_name, label in required_modules.items():
    try:
        mod = importlib.import_module(f"ui.{mod_name}")
    except ImportError as e:
        logger.exception("Cannot import ui.%s", mod_name)
        errors.append(f"Lỗi import 'ui.{mod_name}': {e}")
        continue
    render_fn = getattr(mod, "render", None)
    if callable(render_fn):
        PAGES[label] = render_fn
    else:
        errors.append(f"Module 'ui.{mod_name}' thiếu hàm render().")

# Nếu có lỗi, hiển thị nhưng vẫn cho chạy các trang còn lại
for msg in errors:
    st.error(msg)
if not PAGES:
    st.stop()

# ==== Sidebar điều hướng ====
choice = st.sidebar.radio(" ", list(PAGES.keys()))
PAGES[choice]()
