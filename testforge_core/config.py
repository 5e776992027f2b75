"""TestForge configuration.

Settings come from environment variables (a local .env is loaded first),
optionally overlaid by a JSON settings file.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path

import structlog
from dotenv import load_dotenv

from testforge_core.testing.generation.inference import KeywordStepInference, LLMStepInference
from testforge_core.testing.generation.step_parser import DEFAULT_PARSE_TIMEOUT, StepParser
from testforge_core.testing.storage import DocumentStore, JsonDocumentStore
from testforge_core.testing.utils import LOGGER_NAMESPACE

load_dotenv()

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_DATA_DIR = "./.testforge/data"
DEFAULT_OUTPUT_DIR = "./generated-tests"
DEFAULT_REPORTS_DIR = "./.testforge/reports"
DEFAULT_LLM_PROVIDER = "openrouter"
DEFAULT_LLM_MODEL = "google/gemini-2.5-flash"

# Settings file location
CONFIG_FILE = Path.home() / ".testforge" / "config.json"

# Environment variable -> Settings field
ENV_VARS = {
    "TESTFORGE_DATA_DIR": "data_dir",
    "TESTFORGE_OUTPUT_DIR": "output_dir",
    "TESTFORGE_REPORTS_DIR": "reports_dir",
    "TESTFORGE_BASE_URL": "base_url",
    "TESTFORGE_LLM_PROVIDER": "llm_provider",
    "TESTFORGE_LLM_MODEL": "llm_model",
    "TESTFORGE_LLM_API_KEY": "llm_api_key",
    "TESTFORGE_INFERENCE_TIMEOUT": "inference_timeout",
    "TESTFORGE_LOG_LEVEL": "log_level",
}


# =============================================================================
# CONFIGURATION CLASS
# =============================================================================

@dataclass
class Settings:
    """Runtime configuration for the pipeline."""

    # Storage
    data_dir: str = DEFAULT_DATA_DIR
    output_dir: str = DEFAULT_OUTPUT_DIR
    reports_dir: str = DEFAULT_REPORTS_DIR

    # Default target
    base_url: str | None = None

    # Inference
    llm_provider: str = DEFAULT_LLM_PROVIDER
    llm_model: str | None = None
    llm_api_key: str | None = None
    inference_timeout: float = DEFAULT_PARSE_TIMEOUT

    log_level: str = "INFO"

    def __post_init__(self):
        self.inference_timeout = float(self.inference_timeout)
        if self.inference_timeout <= 0:
            raise ValueError(f"inference_timeout must be > 0, got {self.inference_timeout}")
        self.log_level = str(self.log_level).upper()

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from TESTFORGE_* environment variables."""
        values = {
            field_name: os.environ[var]
            for var, field_name in ENV_VARS.items()
            if os.environ.get(var)
        }
        return cls(**values)

    @classmethod
    def load(cls, path: str | Path | None = None) -> "Settings":
        """Load settings: environment first, then the JSON file on top."""
        settings = cls.from_env()
        config_file = Path(path) if path else CONFIG_FILE
        if not config_file.exists():
            return settings
        try:
            with open(config_file) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid settings file {config_file}: {e}") from e

        known = {f.name for f in fields(cls)}
        overrides = {k: v for k, v in data.items() if k in known}
        return cls(**{**asdict(settings), **overrides})

    def save(self, path: str | Path | None = None) -> None:
        """Save settings to the JSON file (the API key is never written)."""
        config_file = Path(path) if path else CONFIG_FILE
        config_file.parent.mkdir(parents=True, exist_ok=True)
        data = asdict(self)
        data.pop("llm_api_key")
        with open(config_file, "w") as f:
            json.dump(data, f, indent=2)

    @property
    def uses_llm(self) -> bool:
        return bool(self.llm_model)

    def apply_logging(self) -> None:
        """Apply log_level to the pipeline loggers and to structlog (LLM layer)."""
        level = getattr(logging, self.log_level, logging.INFO)
        logging.getLogger(LOGGER_NAMESPACE).setLevel(level)
        structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(level))

    def build_store(self) -> DocumentStore:
        """Document store rooted at data_dir."""
        return JsonDocumentStore(self.data_dir)

    def build_gateway(self):
        """LLMGateway for the configured provider/model."""
        from testforge_core.llm.gateway import LLMGateway

        if not self.llm_model:
            raise ValueError("TESTFORGE_LLM_MODEL is not set")
        return LLMGateway(
            model=self.llm_model,
            api_key=self.llm_api_key,
            provider=self.llm_provider,
            timeout=self.inference_timeout,
        )

    def build_parser(self) -> StepParser:
        """StepParser backed by the LLM when a model is set, keywords otherwise."""
        if self.uses_llm:
            capability = LLMStepInference(self.build_gateway())
        else:
            capability = KeywordStepInference()
        return StepParser(capability, timeout=self.inference_timeout)


def get_settings() -> Settings:
    """Get the current settings."""
    return Settings.load()
