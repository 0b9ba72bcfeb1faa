import os
import json
import logging
import streamlit as st
from google.cloud import vision
from google.cloud import translate_v2 as translate
from google.oauth2 import service_account

logging.basicConfig(level=logging.INFO)


class GCPAuth:
    def __init__(self):
        self.vision_client = None
        self.translate_client = None
        self.initialization_error = None

    def initialize_clients(self):
        """Initialize GCP clients, trying each credential source in turn"""
        try:
            # Method 1: service account JSON in the environment
            if "GCP_SERVICE_ACCOUNT_JSON" in os.environ:
                logging.info("Found GCP_SERVICE_ACCOUNT_JSON in environment")
                creds_json = os.environ["GCP_SERVICE_ACCOUNT_JSON"]
                try:
                    creds_dict = json.loads(creds_json)
                except json.JSONDecodeError as e:
                    self.initialization_error = f"Invalid JSON in GCP_SERVICE_ACCOUNT_JSON: {e}"
                    logging.error(self.initialization_error)
                    return False
                gcp_credentials = service_account.Credentials.from_service_account_info(
                    creds_dict)
                return self._create_clients(gcp_credentials, "environment variable")

            # Method 2: Streamlit secrets
            if self._has_streamlit_secret("gcp_service_account"):
                logging.info("Found gcp_service_account in Streamlit secrets")
                gcp_credentials = service_account.Credentials.from_service_account_info(
                    dict(st.secrets["gcp_service_account"])
                )
                return self._create_clients(gcp_credentials, "Streamlit secrets")

            # Method 3: Application Default Credentials
            logging.info("No explicit service account, falling back to Application Default Credentials")
            return self._create_clients(None, "Application Default Credentials")

        except Exception as e:
            self.initialization_error = str(e)
            logging.error(f"❌ GCP initialization failed: {e}")
            return False

    @staticmethod
    def _has_streamlit_secret(key):
        try:
            return key in st.secrets
        except FileNotFoundError:
            return False

    def _create_clients(self, credentials, method):
        try:
            if credentials is None:
                self.vision_client = vision.ImageAnnotatorClient()
                self.translate_client = translate.Client()
            else:
                self.vision_client = vision.ImageAnnotatorClient(
                    credentials=credentials)
                self.translate_client = translate.Client(credentials=credentials)
            logging.info(f"✅ GCP clients initialized using {method}")
            return True
        except Exception as e:
            self.initialization_error = str(e)
            logging.error(f"❌ Failed to create GCP clients: {e}")
            return False
