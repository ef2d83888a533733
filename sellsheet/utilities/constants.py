from typing import Final

UNITS: Final[tuple[str, ...]] = (
    "g", "kg", "oz", "lb",
    "ml", "l", "fl oz", "cup",
    "tsp", "tbsp", "piece", "each",
)
DEFAULT_UNIT: Final[str] = "g"

CURRENCY_SYMBOL: Final[str] = "$"
DEFAULT_MARGIN: Final[int] = 100
MAX_MARGIN: Final[int] = 1000
MIN_MARGIN: Final[int] = 0

STORAGE_KEY: Final[str] = "sellsheet-data"

APP_NAME: Final[str] = "SellSheet"
APP_TAGLINE: Final[str] = "Profit Calculator"
REPORT_TITLE: Final[str] = "SellSheet Pro - Profit Analysis"

EXPORT_FORMATS: Final[dict[str, str]] = {"PDF": "pdf", "CSV": "csv"}
PDF_FILENAME: Final[str] = "sellsheet-analysis.pdf"
CSV_FILENAME: Final[str] = "sellsheet-data.csv"
