"""
Module: naming.config

Purpose:
    Configuration for the AI filename suggester. Provider credentials are
    not handled here; litellm reads them from the provider's usual
    environment variables (e.g. GEMINI_API_KEY).

Key Classes:
    - NamingConfig: Model, timeout and on/off switch (immutable)

Environment:
    - PDF_TOOLKIT_NAMING_MODEL: litellm model string
    - PDF_TOOLKIT_NAMING_TIMEOUT: Seconds before giving up
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from pdf_toolkit.core.errors import InvalidConfigurationError

DEFAULT_NAMING_MODEL = "gemini/gemini-2.5-flash"
DEFAULT_NAMING_TIMEOUT = 20.0

MODEL_ENV_VAR = "PDF_TOOLKIT_NAMING_MODEL"
TIMEOUT_ENV_VAR = "PDF_TOOLKIT_NAMING_TIMEOUT"


@dataclass(frozen=True)
class NamingConfig:
    """
    Filename suggester configuration (immutable).

    Attributes:
        model: litellm model string
        timeout: Seconds to wait for a suggestion
        enabled: When False the default name is returned without a request
    """

    model: str = DEFAULT_NAMING_MODEL
    timeout: float = DEFAULT_NAMING_TIMEOUT
    enabled: bool = True

    def __post_init__(self) -> None:
        if not self.model:
            raise InvalidConfigurationError("Naming model must not be empty")
        if self.timeout <= 0:
            raise InvalidConfigurationError(f"timeout must be positive: {self.timeout}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> NamingConfig:
        """Build a config from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        model = env.get(MODEL_ENV_VAR) or DEFAULT_NAMING_MODEL
        raw_timeout = env.get(TIMEOUT_ENV_VAR)
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_NAMING_TIMEOUT
        except ValueError as e:
            raise InvalidConfigurationError(
                f"{TIMEOUT_ENV_VAR} must be a number: {raw_timeout!r}"
            ) from e
        return cls(model=model, timeout=timeout)
