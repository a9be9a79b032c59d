"""Configuration management for pulsecode.

Holds the defaults a conversion is run with (scheme, symbol width, initial
polarities, zoom) and a global context so they can be set once and picked up
by the converter without explicit passing.
"""

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .bits import BITS_PER_CHAR
from .schemes import DEFAULT_POLARITY, Scheme

MIN_ZOOM = 0.5
MAX_ZOOM = 2.0


class EncoderConfig(BaseModel):
    """Settings for converting text to line-encoded waveforms."""

    model_config = ConfigDict(validate_assignment=True)

    scheme: Scheme = Field(Scheme.NRZ_L, description="Line-encoding scheme")
    bits_per_char: int = Field(
        BITS_PER_CHAR, ge=1, le=32, description="Bits emitted per character"
    )
    ami_initial_polarity: Literal[1, -1] = Field(
        DEFAULT_POLARITY[Scheme.AMI], description="Polarity of the first AMI mark"
    )
    cmi_initial_polarity: Literal[1, -1] = Field(
        DEFAULT_POLARITY[Scheme.CMI], description="Polarity of the first CMI mark"
    )
    zoom: float = Field(1.0, ge=MIN_ZOOM, le=MAX_ZOOM, description="Plot zoom factor")

    extra: Dict[str, Any] = Field(
        default_factory=dict, description="Custom user-defined parameters"
    )

    @field_validator("scheme", mode="before")
    @classmethod
    def parse_scheme(cls, value: Any) -> Scheme:
        """Accept display names such as "NRZ-L" or "Bipolar AMI"."""
        return Scheme.parse(value)

    @classmethod
    def from_yaml(cls, path: str) -> "EncoderConfig":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML file.

        Returns:
            EncoderConfig instance.
        """
        import yaml

        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    def to_yaml(self, path: str):
        """Save configuration to a YAML file.

        Args:
            path: Path where the YAML file will be saved.
        """
        import yaml

        data = self.model_dump(mode="json")

        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    def initial_polarity(self, scheme) -> Optional[int]:
        """Configured polarity of the first mark, or None if the scheme has none."""
        scheme = Scheme.parse(scheme)
        if scheme is Scheme.AMI:
            return self.ami_initial_polarity
        if scheme is Scheme.CMI:
            return self.cmi_initial_polarity
        return None

    def get(self, key: str, default: Any = None) -> Any:
        """Get a parameter value, checking the extra dict if not a field."""
        if key in type(self).model_fields:
            return getattr(self, key)
        return self.extra.get(key, default)

    def set(self, key: str, value: Any):
        """Set a parameter value, using the extra dict for custom parameters."""
        if key in type(self).model_fields:
            setattr(self, key, value)
        else:
            self.extra[key] = value


# ============================================================================
# Global Configuration Context
# ============================================================================

_global_config: Optional[EncoderConfig] = None


def set_config(config: EncoderConfig):
    """Set the global configuration."""
    global _global_config
    _global_config = config


def get_config() -> Optional[EncoderConfig]:
    """Get the current global configuration, or None if not set."""
    return _global_config


def clear_config():
    """Clear the global configuration."""
    global _global_config
    _global_config = None


def require_config() -> EncoderConfig:
    """Get the current config, raising an error if not set.

    Raises:
        RuntimeError: If no config is currently set.
    """
    config = get_config()
    if config is None:
        raise RuntimeError(
            "No encoder configuration is set. Please call set_config(config) first."
        )
    return config
