from fastapi import APIRouter, Depends, HTTPException, status
from diagram_creator.core.config import settings
from diagram_creator.core.exceptions import InvalidDiagramDataError, UnsupportedDiagramTypeError
from diagram_creator.models.enums import DIAGRAM_TYPES
from diagram_creator.models.render_config import RenderConfig
from diagram_creator.schemas.diagram_schemas import (
    DiagramCreateRequest,
    DiagramResponse,
    DefinitionResponse,
    DiagramTypesResponse,
    ValidationResponse,
)
from diagram_creator.services.diagram_service import DiagramService
import structlog

logger = structlog.get_logger()

router = APIRouter(prefix="/diagrams", tags=["Diagrams"])


def get_diagram_service() -> DiagramService:
    """Build a service from the current rendering settings"""
    return DiagramService(
        base_config=RenderConfig.from_settings(settings),
        version=settings.metadata_version,
    )


@router.get("/types", response_model=DiagramTypesResponse)
async def get_diagram_types():
    """List the supported diagram type tags"""
    return DiagramTypesResponse(types=DIAGRAM_TYPES)


@router.post("/validate", response_model=ValidationResponse)
async def validate_diagram(
    request: DiagramCreateRequest,
    service: DiagramService = Depends(get_diagram_service)
):
    """Check a diagram request without generating anything"""
    validation = service.validate(request)
    return ValidationResponse(**validation.to_dict())


@router.post("/definition", response_model=DefinitionResponse)
async def generate_diagram_definition(
    request: DiagramCreateRequest,
    service: DiagramService = Depends(get_diagram_service)
):
    """Generate only the Mermaid definition for a diagram request"""
    try:
        generated = service.generate(request)
        return DefinitionResponse(**generated)

    except UnsupportedDiagramTypeError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.message
        )


@router.post("", response_model=DiagramResponse)
async def create_diagram(
    request: DiagramCreateRequest,
    service: DiagramService = Depends(get_diagram_service)
):
    """Create a complete diagram ready for rendering"""
    try:
        result = service.create(request, request.config)
        return DiagramResponse(**result.to_dict())

    except InvalidDiagramDataError as e:
        logger.warning("Rejected diagram request", errors=e.errors)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except UnsupportedDiagramTypeError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.message
        )
