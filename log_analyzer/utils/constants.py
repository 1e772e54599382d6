import json
from pathlib import Path

config_path = Path(__file__).resolve().parent.parent.parent / "config.json"

config_data = {}
if config_path.is_file():
    with open(config_path, "r", encoding="utf-8") as f:
        config_data = json.load(f)


INPUT_FILE_PATH = config_data.get("INPUT_FILE_PATH", "servidor.log")
REPORT_FILE_PATH = config_data.get("REPORT_FILE_PATH", "relatorio.txt")
MAX_WORKERS = int(config_data.get("MAX_WORKERS", 5))
TARGET_SEVERITY = config_data.get("TARGET_SEVERITY", "ERROR")
PROCESSING_DELAY_MS = int(config_data.get("PROCESSING_DELAY_MS", 100))
FIELD_DELIMITER = config_data.get("FIELD_DELIMITER", ";")
TIMESTAMP_FORMAT = config_data.get("TIMESTAMP_FORMAT", "%Y-%m-%d %H:%M:%S")
SHUTDOWN_TIMEOUT_SECONDS = float(config_data.get("SHUTDOWN_TIMEOUT_SECONDS", 600))
LOG_LEVEL = config_data.get("LOG_LEVEL", "INFO")
LOG_TO_FILE = bool(config_data.get("LOG_TO_FILE", False))
LOG_DIR = config_data.get("LOG_DIR", "logs")

REPORT_TEMPLATE = "Análise finalizada. Total de Erros Críticos encontrados: {count}"
