"""
Configuration options classes for selector-generator.

This module provides strongly-typed option classes for descriptor costs,
blacklists and optimizer selection with validation and type checking.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .defaults import (
    BLACKLIST_ATTRIBUTES,
    BLACKLIST_CLASSES,
    BLACKLIST_IDS,
    COST_ATTR,
    COST_CHILDREN,
    COST_CLASS,
    COST_DISTANCE,
    COST_ID,
    COST_IS_HAS,
    COST_NOT,
    COST_PARENT,
    COST_SIBLING,
    COST_TAG,
    DEFAULT_BOTTOM_UP_THRESHOLD,
    DEFAULT_OPTIMIZER,
    IGNORED_ATTRIBUTES,
    IGNORED_ATTRIBUTES_FOR_EXCLUSION,
)


class OptimizerStrategy(str, Enum):
    """Available descriptor set optimizers."""

    TOP_DOWN = "top_down"
    BOTTOM_UP = "bottom_up"


class CostOptions(BaseModel):
    """Descriptor costs. Lower values indicate higher quality."""

    id: float = Field(COST_ID, ge=0, description="#id fragment")
    class_name: float = Field(COST_CLASS, ge=0, description=".class fragment")
    tag: float = Field(COST_TAG, ge=0, description="Tag name fragment")
    attr: float = Field(COST_ATTR, ge=0, description="[attr] fragment")
    parent: float = Field(COST_PARENT, ge=0, description="Ancestor descriptor")
    sibling: float = Field(COST_SIBLING, ge=0, description="Sibling descriptor")
    children: float = Field(COST_CHILDREN, ge=0, description="Descendant descriptor")
    distance: float = Field(COST_DISTANCE, ge=0, description="Per level of distance")
    is_has: float = Field(COST_IS_HAS, ge=0, description="Contains :is() or :has()")
    negation: float = Field(COST_NOT, ge=0, description="Contains :not()")


class BlacklistOptions(BaseModel):
    """Wildcard patterns for identifiers that must never be used."""

    ids: list[str] = Field(default_factory=lambda: BLACKLIST_IDS.copy())
    classes: list[str] = Field(default_factory=lambda: BLACKLIST_CLASSES.copy())
    attributes: list[str] = Field(
        default_factory=lambda: BLACKLIST_ATTRIBUTES.copy()
    )

    @field_validator("ids", "classes", "attributes", mode="before")
    @classmethod
    def split_patterns(cls, v: Any) -> Any:
        """Accept comma-separated strings as pattern lists."""
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v


class GeneratorOptions(BaseModel):
    """Main configuration class for selector generation.

    Example:
        options = GeneratorOptions(
            costs=CostOptions(sibling=50),
            blacklist=BlacklistOptions(ids=["*generated*"]),
            optimizer=OptimizerStrategy.BOTTOM_UP,
        )
    """

    costs: CostOptions = Field(default_factory=CostOptions)
    blacklist: BlacklistOptions = Field(default_factory=BlacklistOptions)
    ignored_attributes: list[str] = Field(
        default_factory=lambda: IGNORED_ATTRIBUTES.copy(),
        description="Attributes never used as local [attr] descriptors",
    )
    ignored_attributes_for_exclusion: list[str] = Field(
        default_factory=lambda: IGNORED_ATTRIBUTES_FOR_EXCLUSION.copy(),
        description="Attributes never used in exclusion descriptors",
    )
    optimizer: OptimizerStrategy = Field(
        OptimizerStrategy(DEFAULT_OPTIMIZER), description="Descriptor set optimizer"
    )
    bottom_up_threshold: int = Field(
        DEFAULT_BOTTOM_UP_THRESHOLD,
        ge=1,
        description="Starting improvement threshold of the bottom-up optimizer",
    )

    @field_validator("ignored_attributes", "ignored_attributes_for_exclusion")
    @classmethod
    def lower_attribute_names(cls, v: list[str]) -> list[str]:
        """Attribute names compare case-insensitively in HTML."""
        return [name.strip().lower() for name in v if name.strip()]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GeneratorOptions":
        """Create options from dictionary."""
        return cls(**data)

    def merge(self, other: "GeneratorOptions") -> "GeneratorOptions":
        """Merge with another GeneratorOptions, other takes precedence."""
        data = self.model_dump()
        for key, value in other.model_dump(exclude_unset=True).items():
            if isinstance(value, dict) and isinstance(data.get(key), dict):
                data[key] = {**data[key], **value}
            else:
                data[key] = value
        return GeneratorOptions(**data)

    def to_dict(self) -> dict[str, Any]:
        """Convert options to dictionary."""
        return self.model_dump(mode="json")
