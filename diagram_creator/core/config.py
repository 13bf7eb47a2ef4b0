from pydantic_settings import BaseSettings
import os


class Settings(BaseSettings):
    log_level: str = "INFO"
    environment: str = "local"
    api_prefix: str = "/diagram/api/v1"

    # Rendering defaults handed to the Mermaid engine with every diagram
    theme: str = "default"
    security_level: str = "loose"
    font_family: str = '"trebuchet ms", verdana, arial, sans-serif'
    flowchart_curve: str = "basis"
    flowchart_html_labels: bool = True

    # Version tag stamped into diagram metadata
    metadata_version: str = "1.0.0"

    class Config:
        env_file = f"config/{os.getenv('ENV', 'local')}.env"
        env_prefix = "DIAGRAM_"
        case_sensitive = False


settings = Settings()
