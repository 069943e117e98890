"""Provider contract configuration schema."""
from typing import List

from pydantic import BaseModel, Field, field_validator


class ProvidersConfig(BaseModel):
    """Configuration of provider contract discovery."""

    extra_contracts: List[str] = Field(
        default_factory=list,
        description="Import paths ('package.module:ClassName') of additional whitelisted contracts",
    )

    @field_validator("extra_contracts")
    @classmethod
    def validate_import_paths(cls, v: List[str]) -> List[str]:
        """Validate that every entry looks like 'module:QualName'."""
        for path in v:
            module_name, sep, qualname = path.partition(":")
            if not sep or not module_name or not qualname:
                raise ValueError(f"Invalid contract import path '{path}', expected 'module:ClassName'")
        return v
