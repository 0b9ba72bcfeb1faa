import streamlit as st
import os

from config.settings import setup_page_config, MAX_UPLOAD_MB, TARGET_LANGUAGE, TARGET_LANGUAGES
from services.image_processor import ImageProcessor
from utils.image_utils import encode_png


def main():
    setup_page_config()
    st.title("Image Translator — GCP Vision + Translate")

    # Debug info
    st.sidebar.markdown("### 🔧 Debug Info")
    st.sidebar.write(
        f"GCP Env Var: {'GCP_SERVICE_ACCOUNT_JSON' in os.environ}")

    if "processor" not in st.session_state:
        st.session_state.processor = ImageProcessor()

        with st.spinner("🔐 Initializing GCP services..."):
            success = st.session_state.processor.initialize_services()

        st.session_state.gcp_initialized = success
        if success:
            st.sidebar.success("✅ GCP initialized successfully!")
        else:
            st.sidebar.error("❌ GCP initialization failed")

    if not st.session_state.get("gcp_initialized"):
        error = st.session_state.processor.gcp_services.initialization_error
        st.error(f"""
        🔐 **GCP Services Not Available**

        Provide credentials through GCP_SERVICE_ACCOUNT_JSON, Streamlit secrets
        (gcp_service_account) or GOOGLE_APPLICATION_CREDENTIALS, with the Vision
        and Cloud Translation APIs enabled.

        {error or ''}
        """)
        return

    st.markdown("Upload an image with **English** text to translate it in place.")

    codes = list(TARGET_LANGUAGES.values())
    default_idx = codes.index(TARGET_LANGUAGE) if TARGET_LANGUAGE in codes else 0
    language = st.selectbox("Target language", list(TARGET_LANGUAGES.keys()), index=default_idx)
    target = TARGET_LANGUAGES[language]

    uploaded = st.file_uploader("Image", type=["png", "jpg", "jpeg", "webp"])
    run = st.button("Translate")

    if run and uploaded is not None:
        data = uploaded.getvalue()
        if len(data) > MAX_UPLOAD_MB * 1024 * 1024:
            st.error(f"Image is larger than {MAX_UPLOAD_MB} MB")
            return

        with st.spinner("Detecting and translating text..."):
            try:
                st.session_state.result = st.session_state.processor.process_image(data, target=target)
            except Exception as e:
                st.error(f"Processing failed: {e}")
                st.session_state.result = None

    result = st.session_state.get("result")
    if result:
        c1, c2 = st.columns(2)
        with c1:
            st.image(result.original_image, caption="Original")
        with c2:
            st.image(result.final_image, caption=f"Translated ({result.metadata.get('target')})")

        meta = result.metadata
        if meta.get("detected"):
            c11, c12 = st.columns([1, 2])
            with c11:
                st.markdown("**Original Text:**")
                st.write(' '.join(meta.get("orig_blocks", [])))
            with c12:
                st.write(f"Detected blocks: {meta.get('detected')}")
                st.markdown("**Translated Text:**")
                st.write(', '.join(meta.get("trans_blocks", [])))
        else:
            st.info("No text detected.")

        st.download_button(
            "Download PNG",
            data=encode_png(result.final_image),
            file_name="translated.png",
            mime="image/png"
        )


if __name__ == "__main__":
    main()
