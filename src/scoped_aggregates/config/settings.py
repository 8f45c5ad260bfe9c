"""
Typed configuration models using Pydantic.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from scoped_aggregates.features.descriptors import (
    FeatureDescriptor,
    FeatureSpec,
    build_continuous_feature,
)
from scoped_aggregates.features.personal_data import PersonalDataType
from scoped_aggregates.scoping.index import DEFAULT_SIZE_WARNING_THRESHOLD


class BaseFeatureConfig(BaseModel):
    """A base aggregate feature to be scoped."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Aggregate feature name")
    feature_id: int | None = Field(
        default=None, description="Explicit feature id (derived from name if unset)"
    )
    personal_data_types: list[PersonalDataType] = Field(
        default_factory=list, description="Privacy tags of the base feature"
    )

    def to_descriptor(self) -> FeatureDescriptor:
        """Build the continuous feature descriptor for this entry."""
        return build_continuous_feature(
            FeatureSpec(
                name=self.name,
                personal_data_types=frozenset(self.personal_data_types),
                feature_id=self.feature_id,
            )
        )


class ScopingConfig(BaseModel):
    """Complete scoping configuration."""

    model_config = ConfigDict(frozen=True)

    scope_name: str = Field(min_length=1, description="What the scope keys represent")
    scope_keys: list[str] = Field(min_length=1, description="Supported scope keys")
    features: list[BaseFeatureConfig] = Field(
        default_factory=list, description="Base aggregate features to scope"
    )
    size_warning_threshold: int = Field(
        default=DEFAULT_SIZE_WARNING_THRESHOLD,
        ge=1,
        description="Index size above which a warning is logged",
    )

    @field_validator("scope_keys")
    @classmethod
    def validate_unique_keys(cls, v: list[str]) -> list[str]:
        """Ensure scope keys are unique."""
        duplicates = sorted({key for key in v if v.count(key) > 1})
        if duplicates:
            msg = f"Duplicate scope keys: {', '.join(duplicates)}"
            raise ValueError(msg)
        return v

    @field_validator("features")
    @classmethod
    def validate_unique_features(
        cls, v: list[BaseFeatureConfig]
    ) -> list[BaseFeatureConfig]:
        """Ensure feature names are unique."""
        names = [feature.name for feature in v]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            msg = f"Duplicate feature names: {', '.join(duplicates)}"
            raise ValueError(msg)
        return v

    @property
    def index_size(self) -> int:
        """Number of scoped features this configuration generates."""
        return len(self.features) * len(self.scope_keys)

    def base_features(self) -> list[FeatureDescriptor]:
        """Descriptors for all configured base features."""
        return [feature.to_descriptor() for feature in self.features]
