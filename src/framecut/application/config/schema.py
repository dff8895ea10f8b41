"""Pydantic models for cut job configuration files.

The models check structure and types only: required fields, numeric types,
known units and no unknown keys. Value rules such as positive lengths or
pieces that fit the stock are left to the input validator, so configuration
files and programmatic callers get the same typed errors.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from framecut.domain.units import Unit

# Supported schema versions for configuration files
# Version 1.0: Frames with sub-components and a single standard profile
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class SubComponentConfig(BaseModel):
    """Additional linear piece required by a frame.

    Attributes:
        id: Optional identifier; generated from the position when omitted.
        name: Display name, e.g. "Mullion".
        length: Piece length in the frame's unit.
        quantity: Number of pieces.
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = None
    name: str
    length: float
    quantity: int = 1


class FrameConfig(BaseModel):
    """Window frame dimensions.

    Attributes:
        id: Optional identifier; generated from the position when omitted.
        ref_no: Reference label printed on each piece.
        width: Frame width (top and bottom pieces).
        height: Frame height (left and right pieces).
        unit: Unit of width, height and sub-component lengths.
        sub_components: Extra pieces such as mullions or sash bars.
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = None
    ref_no: str
    width: float
    height: float
    unit: Unit = Unit.MILLIMETER
    sub_components: list[SubComponentConfig] = Field(default_factory=list)


class ProfileConfig(BaseModel):
    """Standard stock profile.

    Attributes:
        length: Stock length.
        unit: Unit of length and blade size.
        include_kerf: Deduct blade width between cuts.
        blade_size: Blade width, in the profile's unit.
    """

    model_config = ConfigDict(extra="forbid")

    length: float
    unit: Unit = Unit.MILLIMETER
    include_kerf: bool = False
    blade_size: float = Field(default=3.0, description="Saw blade width")


class CutJobConfiguration(BaseModel):
    """Root configuration model for a cut job.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        profile: Standard stock profile
        frames: Frames to cut, in listing order

    Example:
        >>> config = CutJobConfiguration(
        ...     schema_version="1.0",
        ...     profile=ProfileConfig(length=6000),
        ...     frames=[FrameConfig(ref_no="W1", width=1000, height=1200)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    profile: ProfileConfig
    frames: list[FrameConfig] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
