from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"

    input_path: str = ""
    output_dir: str = "output"
    document_title: str = ""

    document_language: str = "fr-FR"
    date_locale: str = "fr_FR"
    date_pattern: str = "dd/MM/yyyy"
    date_timezone: str = "UTC"

    mini_game_seed: int | None = None

    export_creator: str = "EduLearning+ Universal Pedagogy AI"
    export_producer: str = "Universal Accessible Education System"
