import logging
from dataclasses import replace
from typing import List, Optional
from services.gcp_services import GCPServices
from models.data_models import ProcessedImage, Region
from utils.geometry_utils import sort_regions
from utils.image_utils import decode_image, encode_png
from utils.ocr_utils import extract_regions
from utils.text_utils import TextOverlay
from config.settings import FONT_PATH, ERASE_MODE, TARGET_LANGUAGE

logging.basicConfig(level=logging.INFO)


def attach_translations(regions: List[Region], translations: List[str]) -> List[Region]:
    """Pair translations with regions by position; missing entries become empty strings"""
    out = []
    for i, region in enumerate(regions):
        translated = translations[i] if i < len(translations) else ""
        out.append(replace(region, translated_text=translated or ""))
    return out


class ImageProcessor:
    def __init__(self, gcp_services: Optional[GCPServices] = None, text_overlay: Optional[TextOverlay] = None):
        self.gcp_services = gcp_services or GCPServices()
        self.text_overlay = text_overlay or TextOverlay(FONT_PATH, erase_mode=ERASE_MODE)

    def initialize_services(self):
        """Initialize GCP services"""
        return self.gcp_services.initialize()

    def detect_regions(self, image_bytes: bytes) -> List[Region]:
        """OCR the image and return its paragraphs in reading order"""
        tree = self.gcp_services.vision_ocr_annotation(image_bytes)
        return sort_regions(extract_regions(tree))

    def translate_regions(self, regions: List[Region], target: str) -> List[Region]:
        if not regions:
            return []
        translations = self.gcp_services.translate_texts([r.text for r in regions], target=target)
        return attach_translations(regions, translations)

    def process_image(self, image_bytes: bytes, target: str = TARGET_LANGUAGE) -> ProcessedImage:
        """Full image processing pipeline"""
        original = decode_image(image_bytes)
        regions = self.translate_regions(self.detect_regions(image_bytes), target)
        final = self.text_overlay.overlay_translated_text(original, regions)

        meta = {
            "detected": len(regions),
            "target": target,
            "orig_blocks": [r.text for r in regions],
            "trans_blocks": [r.translated_text for r in regions],
        }
        logging.info(f"Processed image {original.size[0]}x{original.size[1]} with {len(regions)} region(s)")
        return ProcessedImage(original_image=original, final_image=final, regions=regions, metadata=meta)

    def translate_image_bytes(self, image_bytes: bytes, target: str = TARGET_LANGUAGE) -> bytes:
        """Translate an encoded image and return the result as PNG bytes"""
        return encode_png(self.process_image(image_bytes, target).final_image)
