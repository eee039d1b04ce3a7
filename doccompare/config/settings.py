from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    uploads_dir: Path = Path("uploads")
    max_upload_bytes: int = 50 * 1024 * 1024
    allowed_extensions: str = "pdf,doc,docx,txt,xlsx,xls,jpg,jpeg,png,gif"

    ocr_provider: str = "http"
    ocr_base_url: str = "http://localhost:8000"
    ocr_endpoint: str = "/ocr"
    ocr_api_key: str = ""
    ocr_timeout_seconds: int = 120

    pdf_engine: str = "pdfplumber"

    table_marker: str = "Item"

    def allowed_extension_set(self) -> frozenset[str]:
        """Allowed upload extensions, lower-cased and without the leading dot."""
        return frozenset(
            ext.strip().lower().lstrip(".")
            for ext in self.allowed_extensions.split(",")
            if ext.strip()
        )
