from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class DiagramCreateRequest(BaseModel):
    type: Optional[str] = None
    title: Optional[str] = None
    direction: Optional[str] = None
    content: Optional[Any] = None
    definition: Optional[str] = None
    date_format: Optional[str] = Field(default=None, alias="dateFormat")
    # Rendering configuration overrides
    config: Dict[str, Any] = Field(default_factory=dict)

    class Config:
        populate_by_name = True


class ValidationResponse(BaseModel):
    is_valid: bool = Field(alias="isValid")
    errors: List[str]

    class Config:
        populate_by_name = True


class DefinitionResponse(BaseModel):
    definition: str
    warnings: List[str] = []


class DiagramMetadataResponse(BaseModel):
    created_at: str = Field(alias="createdAt")
    version: str

    class Config:
        populate_by_name = True


class DiagramResponse(BaseModel):
    definition: str
    config: Dict[str, Any]
    type: str
    title: str
    metadata: DiagramMetadataResponse
    warnings: List[str] = []


class DiagramTypesResponse(BaseModel):
    types: Dict[str, str]
