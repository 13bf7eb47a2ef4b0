from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional

import structlog

from diagram_creator.core.exceptions import InvalidDiagramDataError
from diagram_creator.generators.dispatcher import generate_definition
from diagram_creator.models.diagram import (
    DEFAULT_TITLE, METADATA_VERSION, DiagramMetadata, DiagramRequest, DiagramResult,
    ValidationResult
)
from diagram_creator.models.render_config import RenderConfig

logger = structlog.get_logger()

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _present(value: Any) -> bool:
    return value is not None and value != ""


def validate_diagram_data(request: Any) -> ValidationResult:
    """
    Check the structural preconditions of a diagram request.

    All violations are collected, except for a missing request, which
    short-circuits with a single error.
    """
    if request is None:
        return ValidationResult.failure(["Diagram data is required"])

    request = DiagramRequest.coerce(request)
    errors: List[str] = []

    if not _present(request.type):
        errors.append("Diagram type is required")

    if not _present(request.content) and not _present(request.definition):
        errors.append("Diagram content or definition is required")

    if errors:
        return ValidationResult.failure(errors)
    return ValidationResult.success()


def create_diagram(
    request: Any,
    config: Optional[Mapping[str, Any]] = None,
    *,
    base_config: Optional[RenderConfig] = None,
    clock: Optional[Clock] = None,
    version: str = METADATA_VERSION,
) -> DiagramResult:
    """
    Validate a request, generate its definition and wrap it with metadata.

    Args:
        request: ``DiagramRequest`` or mapping in the wire shape
        config: Rendering configuration overrides, merged shallowly
        base_config: Configuration the overrides are merged onto
            (a default ``RenderConfig`` when omitted)
        clock: Returns the creation time (current UTC time when omitted)
        version: Version tag stamped into the metadata

    Returns:
        DiagramResult

    Raises:
        InvalidDiagramDataError: If the request fails validation or
            ``config`` is not a mapping
        UnsupportedDiagramTypeError: If the type has no generator
    """
    validation = validate_diagram_data(request)
    if not validation.is_valid:
        logger.warning("Diagram data failed validation", errors=validation.errors)
        raise InvalidDiagramDataError(validation.errors)

    request = DiagramRequest.coerce(request)
    warnings: List[str] = []
    definition = generate_definition(request, warnings=warnings)
    merged_config = (base_config or RenderConfig()).merge(config)
    created_at = format_timestamp((clock or _utc_now)())

    result = DiagramResult(
        definition=definition,
        config=merged_config,
        type=request.type,
        title=request.title or DEFAULT_TITLE,
        metadata=DiagramMetadata(created_at=created_at, version=version),
        warnings=tuple(warnings),
    )
    logger.info(
        "Diagram created",
        diagram_type=result.type,
        title=result.title,
        raw_definition=bool(request.definition),
        warnings=len(warnings),
    )
    return result


class DiagramService:
    """Diagram operations bound to one base configuration and clock."""

    def __init__(self, base_config: Optional[RenderConfig] = None,
                 clock: Optional[Clock] = None, version: str = METADATA_VERSION):
        self.base_config = base_config or RenderConfig()
        self.clock = clock or _utc_now
        self.version = version

    def validate(self, request: Any) -> ValidationResult:
        return validate_diagram_data(request)

    def generate(self, request: Any) -> Dict[str, Any]:
        """Generate a definition and report skipped sections alongside it."""
        warnings: List[str] = []
        definition = generate_definition(request, warnings=warnings)
        return {"definition": definition, "warnings": warnings}

    def create(self, request: Any, config: Optional[Mapping[str, Any]] = None) -> DiagramResult:
        return create_diagram(
            request,
            config,
            base_config=self.base_config,
            clock=self.clock,
            version=self.version,
        )
