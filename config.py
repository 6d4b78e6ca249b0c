"""
Configuration settings for the web server.
Environment variables override defaults.
"""
import json  # Lettura dei metadati SEO
import os  # Variabili d'ambiente
from dataclasses import dataclass, field  # Dataclass per le impostazioni
from pathlib import Path  # Percorsi dei file dati
from typing import List  # Tipi

BASE_DIR = Path(__file__).resolve().parent  # Radice del progetto (file dati, template)
DATA_DIR = BASE_DIR / "data"

GLITCH_DEFAULT_URL = "glitch-default"  # Segnaposto sostituito con il dominio del progetto
SEO_REQUIRED_FIELDS = ("url", "title", "description")


class ConfigError(Exception):
    """A required static resource is missing or malformed."""


@dataclass
class Settings:
    """Web server configuration"""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])

    # Text generation
    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-3.5-turbo-instruct"
    OPENAI_TEMPERATURE: float = 0.8
    OPENAI_MAX_TOKENS: int = 100
    OPENAI_TIMEOUT: float = 30.0  # seconds

    # Static data
    PROJECT_DOMAIN: str = ""
    SEO_PATH: str = str(DATA_DIR / "seo.json")
    COLORS_PATH: str = str(DATA_DIR / "colors.json")

    def __post_init__(self):
        """Load from environment variables"""
        for key in self.__dataclass_fields__:
            env_value = os.getenv(key)
            if env_value is not None:
                field_type = self.__dataclass_fields__[key].type
                if field_type == bool:
                    setattr(self, key, env_value.lower() in ("true", "1", "yes"))
                elif field_type == int:
                    setattr(self, key, int(env_value))
                elif field_type == float:
                    setattr(self, key, float(env_value))
                elif field_type == List[str]:
                    setattr(self, key, env_value.split(","))
                else:
                    setattr(self, key, env_value)


def read_json(path) -> dict:
    # Legge un file JSON; qualunque problema e' fatale per l'avvio
    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError:
        raise ConfigError(f"File not found: {path}")
    except (OSError, ValueError) as e:
        raise ConfigError(f"Cannot read {path}: {e}")
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a JSON object in {path}")
    return data


def load_seo(path, project_domain: str = "") -> dict:
    """Load the site metadata passed to every template as ``seo``.

    A ``url`` equal to ``"glitch-default"`` is replaced with the project's
    own glitch.me address.
    """
    seo = read_json(path)
    missing = [k for k in SEO_REQUIRED_FIELDS if k not in seo]
    if missing:
        raise ConfigError(f"SEO record in {path} is missing: {', '.join(missing)}")
    if seo["url"] == GLITCH_DEFAULT_URL:
        seo["url"] = f"https://{project_domain}.glitch.me"  # Dominio dalla variabile PROJECT_DOMAIN
    return seo
