import html
import logging
from typing import List
from google.cloud import vision
from config.auth import GCPAuth
from config.settings import SOURCE_LANGUAGE, TARGET_LANGUAGE
from models.data_models import AnnotationTree
from utils.ocr_utils import annotation_from_vision


class GCPServices:
    def __init__(self):
        self.auth = GCPAuth()
        self.vision_client = None
        self.translate_client = None
        self.initialization_error = None

    def initialize(self):
        """Initialize GCP services - returns True/False"""
        success = self.auth.initialize_clients()

        if success:
            self.vision_client = self.auth.vision_client
            self.translate_client = self.auth.translate_client
            return True
        else:
            self.initialization_error = self.auth.initialization_error
            return False

    def vision_ocr_annotation(self, image_bytes: bytes) -> AnnotationTree:
        """Run document text detection and return the page/block/paragraph tree"""
        if not self.vision_client:
            raise RuntimeError("Vision client not initialized")

        image = vision.Image(content=image_bytes)
        response = self.vision_client.document_text_detection(image=image)
        if response.error.message:
            raise RuntimeError(response.error.message)

        tree = annotation_from_vision(response.full_text_annotation)
        logging.info(f"Vision returned {len(tree.pages)} page(s)")
        return tree

    def translate_texts(self, text_list: List[str], target: str = TARGET_LANGUAGE,
                        source: str = SOURCE_LANGUAGE) -> List[str]:
        """Translate texts using GCP Translate; result is index-aligned with text_list"""
        if not self.translate_client:
            raise RuntimeError("Translate client not initialized")

        if not text_list:
            return []

        try:
            resp = self.translate_client.translate(
                text_list, target_language=target, source_language=source)
        except Exception as e:
            logging.error(f"GCP Translate error: {e}")
            raise

        if isinstance(resp, dict):
            resp = [resp]
        out = []
        for it in resp:
            if isinstance(it, dict):
                out.append(html.unescape(it.get("translatedText", "")))
            else:
                out.append(html.unescape(str(it)))
        logging.info(f"Translated {len(out)}/{len(text_list)} text(s) to '{target}'")
        return out
