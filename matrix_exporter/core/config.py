import os
from dotenv import load_dotenv
from pathlib import Path

# .env opzionale nella root del package (matrix_exporter/.env)
env_path = Path(__file__).resolve().parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

# remote matrix
OSADL_MATRIX_URL = os.getenv(
    "OSADL_MATRIX_URL",
    "https://www.osadl.org/fileadmin/checklists/matrixseqexpl.json",
)

# unset means wait for the server indefinitely
_timeout = os.getenv("MATRIX_REQUEST_TIMEOUT")
MATRIX_REQUEST_TIMEOUT = float(_timeout) if _timeout else None

# output directory, file and format
# l'API scrive solo dentro OUTPUT_BASE_DIR
OUTPUT_BASE_DIR = os.getenv("OUTPUT_BASE_DIR", ".")
MATRIX_FILE_NAME = os.getenv("MATRIX_FILE_NAME", "x.txt")
MATRIX_OUTPUT_PATH = os.path.join(OUTPUT_BASE_DIR, MATRIX_FILE_NAME)
MATRIX_FIELD_SEPARATOR = os.getenv("MATRIX_FIELD_SEPARATOR", "[:::]")
