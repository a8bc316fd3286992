"""
Configuration management using Pydantic Settings.

Loads runtime settings from environment variables (and .env) and the
DOCX conversion style map from config/style_map.yaml.
Provides type-safe access to:
- Content, public and output directory locations
- Catalog URL prefix
- Worker count for the parallel pipeline
- mammoth style map for heading conversion
"""

from pathlib import Path
from typing import List, Optional
import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Environment Variables (from .env):
        CONTENT_DIR: Directory holding report descriptor JSON files
        PUBLIC_DIR: Directory that DOCX paths in descriptors are relative to
        OUT_DIR: Directory receiving generated report JSON and index.json
        URL_PREFIX: Prefix for catalog entry URLs (e.g., "/reports")
        MAX_WORKERS: Worker processes used by ParallelReportBuildPipeline
        LOG_LEVEL: Logging level for the batch script

    Example:
        >>> config = get_app_config()
        >>> config.content_dir
        'content/reports'
        >>> config.url_prefix
        '/reports'
    """

    content_dir: str = Field(
        default="content/reports",
        description="Directory containing report descriptor JSON files"
    )

    public_dir: str = Field(
        default="public",
        description="Directory that descriptor 'docx' paths are resolved against"
    )

    out_dir: str = Field(
        default="src/generated",
        description="Directory for generated report documents and index.json"
    )

    url_prefix: str = Field(
        default="/reports",
        description="URL prefix for catalog entries"
    )

    max_workers: int = Field(
        default=4,
        ge=1,
        description="Number of worker processes for parallel builds"
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level name"
    )

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    @property
    def content_path(self) -> Path:
        return Path(self.content_dir)

    @property
    def public_path(self) -> Path:
        return Path(self.public_dir)

    @property
    def out_path(self) -> Path:
        return Path(self.out_dir)


# Singleton pattern - loaded once, cached forever
_app_config: Optional[AppConfig] = None


def get_app_config() -> AppConfig:
    """
    Get global application config instance (lazy-loaded singleton).

    Configuration is loaded from environment variables and .env file.
    Cached after first access.

    Returns:
        Singleton AppConfig instance
    """
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config


# Style map configuration
_style_map: Optional[List[str]] = None


def get_style_map() -> List[str]:
    """
    Get the mammoth style map used for DOCX → HTML conversion.

    Loads from config/style_map.yaml and caches the result. Each entry is
    one mammoth style mapping line, e.g.
    "p[style-name='Heading 1'] => h2:fresh".

    Returns:
        List of style map lines

    Raises:
        FileNotFoundError: If config/style_map.yaml not found
        ValueError: If the file has no 'docx' list

    Example:
        >>> get_style_map()[0]
        "p[style-name='Heading 1'] => h2:fresh"
    """
    global _style_map

    if _style_map is not None:
        return _style_map

    current_file = Path(__file__)
    project_root = current_file.parent.parent.parent  # src/risk_reports/config.py -> root
    style_path = project_root / 'config' / 'style_map.yaml'

    if not style_path.exists():
        # Try alternative: relative to current working directory
        style_path = Path('config/style_map.yaml')

    if not style_path.exists():
        raise FileNotFoundError(
            f"Style map config not found at {style_path}. "
            f"Ensure config/style_map.yaml exists in project root."
        )

    with open(style_path, 'r', encoding='utf-8') as f:
        style_data = yaml.safe_load(f) or {}

    entries = style_data.get('docx')
    if not isinstance(entries, list):
        raise ValueError(
            f"Style map config {style_path} must define a 'docx' list of mappings"
        )

    _style_map = [str(entry) for entry in entries]

    return _style_map
