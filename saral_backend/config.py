"""
Configuration settings for the Saral Loan backend.
Values come from the environment, with a project-level .env file loaded first.
"""

import os
from dotenv import load_dotenv

# Load environment variables from the project root .env file
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
load_dotenv(os.path.join(_project_root, ".env"))

# ======================
# Storage Configuration
# ======================

# One of "memory", "file", "mongo"
STORE_BACKEND = os.getenv("STORE_BACKEND", "file")
STORE_PATH = os.getenv("STORE_PATH", os.path.join(_project_root, "data", "local_storage.json"))

MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017/")
MONGO_DB_NAME = os.getenv("MONGO_DB_NAME", "saral_loan_db")
MONGO_COLLECTION = os.getenv("MONGO_COLLECTION", "local_storage")

# ======================
# Logging
# ======================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# ======================
# Simulation Settings
# ======================

# Uploaded documents auto-verify when random() > threshold (70% of the time)
AUTO_VERIFY_THRESHOLD = float(os.getenv("AUTO_VERIFY_THRESHOLD", "0.3"))

# Cosmetic delays used by the UI to imitate processing time
UPLOAD_DELAY_SECONDS = float(os.getenv("UPLOAD_DELAY_SECONDS", "2.0"))
DECISION_PROCESSING_SECONDS = float(os.getenv("DECISION_PROCESSING_SECONDS", "2.0"))
DECISION_ANALYZING_SECONDS = float(os.getenv("DECISION_ANALYZING_SECONDS", "3.0"))
BOT_REPLY_DELAY_SECONDS = float(os.getenv("BOT_REPLY_DELAY_SECONDS", "1.5"))

# ======================
# Server Configuration
# ======================

DEFAULT_API_PORT = int(os.getenv("DEFAULT_API_PORT", "8000"))
