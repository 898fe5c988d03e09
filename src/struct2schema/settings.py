"""Application settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Marker searched for in doc comments
PATTERN = "@struct2schema"

# Generation
DB_TYPE = os.getenv("STRUCT2SCHEMA_DB_TYPE", "sqlite3")
TEMPLATE_PATH = os.getenv("STRUCT2SCHEMA_TEMPLATE")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "").lower() in ("1", "true", "yes")
