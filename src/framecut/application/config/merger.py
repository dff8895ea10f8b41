"""Configuration merging utilities for CLI override support.

Precedence is CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from typing import Any

from framecut.application.config.schema import CutJobConfiguration, ProfileConfig
from framecut.domain.units import Unit, convert


def merge_config_with_cli(
    config: CutJobConfiguration,
    *,
    stock_length: float | None = None,
    unit: Unit | None = None,
    kerf: float | None = None,
) -> CutJobConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: The base configuration
        stock_length: Override for profile.length
        unit: Override for profile.unit; blade_size is converted to it
        kerf: Override for profile.blade_size; also turns kerf accounting on

    Returns:
        A new CutJobConfiguration with merged values

    Example:
        >>> merged = merge_config_with_cli(config, kerf=4.0)
        >>> merged.profile.include_kerf, merged.profile.blade_size
        (True, 4.0)
    """
    profile_data = _build_profile_data(config, stock_length, unit, kerf)
    return config.model_copy(update={"profile": ProfileConfig.model_validate(profile_data)})


def _build_profile_data(
    config: CutJobConfiguration,
    stock_length: float | None,
    unit: Unit | None,
    kerf: float | None,
) -> dict[str, Any]:
    profile_data = config.profile.model_dump()

    if stock_length is not None:
        profile_data["length"] = stock_length
    if unit is not None:
        if kerf is None:
            # Blade size is expressed in the profile's unit
            profile_data["blade_size"] = convert(
                config.profile.blade_size, config.profile.unit, unit
            )
        profile_data["unit"] = unit
    if kerf is not None:
        profile_data["blade_size"] = kerf
        profile_data["include_kerf"] = True

    return profile_data
