import os
import logging
import streamlit as st

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Constants
SOURCE_LANGUAGE = os.environ.get("SOURCE_LANGUAGE", "en")
TARGET_LANGUAGE = os.environ.get("TARGET_LANGUAGE", "es")
MAX_UPLOAD_MB = int(os.environ.get("MAX_UPLOAD_MB", "5"))
FONT_PATH = os.environ.get("FONT_PATH", "assets/fonts/POPPINS-MEDIUM.TTF")
ERASE_MODE = os.environ.get("ERASE_MODE", "fill")  # "fill" or "inpaint"

TARGET_LANGUAGES = {
    "Spanish": "es",
    "French": "fr",
    "German": "de",
    "Italian": "it",
    "Portuguese": "pt",
    "Japanese": "ja",
    "Chinese (Simplified)": "zh-CN",
}

# Layout
Y_TOLERANCE = 6
PAD_RATIO = 0.08
MIN_FONT_SIZE = 10
MIN_TEXT_AREA = 10
INITIAL_FONT_RATIO = 0.75
LINE_HEIGHT_RATIO = 1.25
FONT_SHRINK_FACTOR = 0.9
BACKGROUND_COLOR = (255, 255, 255)
TEXT_COLOR = (0, 0, 0)
BOX_EXPANSION_INPAINT = 4


class AppConfig:
    PAGE_TITLE = "Image Translator (GCP)"
    PAGE_ICON = "🌐"
    LAYOUT = "wide"

def setup_page_config():
    """Configure Streamlit page settings."""
    st.set_page_config(
        layout=AppConfig.LAYOUT,
        page_title=AppConfig.PAGE_TITLE,
        page_icon=AppConfig.PAGE_ICON
    )
