"""Configuration schema and loading for cut job files.

Public API:
    - CutJobConfiguration: Root configuration model
    - FrameConfig / SubComponentConfig / ProfileConfig: Section models
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_frames / config_to_profile: Convert to domain specs
    - merge_config_with_cli: Apply command line overrides

Example:
    >>> from pathlib import Path
    >>> from framecut.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("job.json"))
    ...     print(f"{len(config.frames)} frames on {config.profile.length} stock")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from framecut.application.config.adapter import config_to_frames, config_to_profile
from framecut.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from framecut.application.config.merger import merge_config_with_cli
from framecut.application.config.schema import (
    SUPPORTED_VERSIONS,
    CutJobConfiguration,
    FrameConfig,
    ProfileConfig,
    SubComponentConfig,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "CutJobConfiguration",
    "FrameConfig",
    "ProfileConfig",
    "SubComponentConfig",
    "config_to_frames",
    "config_to_profile",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
]
