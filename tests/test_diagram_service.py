import re
from datetime import datetime, timedelta, timezone

import pytest

from diagram_creator import (
    DiagramService, InvalidDiagramDataError, RenderConfig, UnsupportedDiagramTypeError,
    create_diagram
)
from diagram_creator.services.diagram_service import format_timestamp

PIE_REQUEST = {
    "type": "pie",
    "title": "Budget",
    "content": {"title": "T", "data": [{"label": "A", "value": 1}, {"label": "B", "value": 2}]},
}


class TestCreateDiagram:

    def test_complete_result(self, fixed_clock):
        result = create_diagram(PIE_REQUEST, clock=fixed_clock)

        assert result.definition == "pie showData\n    title T\n    \"A\" : 1\n    \"B\" : 2\n"
        assert result.type == "pie"
        assert result.title == "Budget"
        assert result.metadata.created_at == "2024-05-17T09:30:15.123Z"
        assert result.metadata.version == "1.0.0"
        assert result.config == RenderConfig().to_dict()
        assert result.warnings == ()

    def test_title_defaults(self, fixed_clock):
        result = create_diagram({"type": "mindmap", "content": {}}, clock=fixed_clock)
        assert result.title == "Untitled Diagram"

    def test_invalid_data_raises_with_joined_messages(self):
        with pytest.raises(InvalidDiagramDataError) as exc_info:
            create_diagram({"title": "x"})
        error = exc_info.value
        assert error.errors == [
            "Diagram type is required",
            "Diagram content or definition is required",
        ]
        assert str(error) == (
            "Invalid diagram data: Diagram type is required, "
            "Diagram content or definition is required"
        )

    def test_missing_request_raises(self):
        with pytest.raises(InvalidDiagramDataError, match="Diagram data is required"):
            create_diagram(None)

    def test_unsupported_type_raises(self):
        with pytest.raises(UnsupportedDiagramTypeError):
            create_diagram({"type": "gitGraph", "content": {"commits": []}})

    def test_idempotent_with_fixed_clock(self, examples, fixed_clock):
        for sample in examples.values():
            first = create_diagram(sample, clock=fixed_clock)
            second = create_diagram(sample, clock=fixed_clock)
            assert first == second

    def test_config_overrides_are_shallow(self, fixed_clock):
        result = create_diagram(
            PIE_REQUEST,
            {"theme": "dark", "flowchart": {"curve": "linear"}, "logLevel": 1},
            clock=fixed_clock,
        )
        assert result.config["theme"] == "dark"
        assert result.config["flowchart"] == {"curve": "linear"}
        assert result.config["logLevel"] == 1
        assert result.config["securityLevel"] == "loose"

    def test_non_mapping_config_is_rejected(self, fixed_clock):
        with pytest.raises(InvalidDiagramDataError, match="Rendering config must be an object"):
            create_diagram(PIE_REQUEST, [("a", 1), ("b",)], clock=fixed_clock)

    def test_base_config_and_version(self, fixed_clock):
        result = create_diagram(
            PIE_REQUEST,
            base_config=RenderConfig(theme="forest"),
            clock=fixed_clock,
            version="2.0.0",
        )
        assert result.config["theme"] == "forest"
        assert result.metadata.version == "2.0.0"

    def test_warnings_are_collected(self, fixed_clock):
        result = create_diagram({"type": "pie", "content": {"data": [{"label": "A", "value": 1}, 5]}},
                                clock=fixed_clock)
        assert result.warnings == ("pie: 'data[1]' is not an object; entry skipped",)
        assert result.definition.count("\n") == 3

    def test_to_dict_and_render_payload(self, fixed_clock):
        result = create_diagram(PIE_REQUEST, clock=fixed_clock)
        data = result.to_dict()
        assert data["metadata"] == {"createdAt": "2024-05-17T09:30:15.123Z", "version": "1.0.0"}
        assert data["warnings"] == []
        assert result.render_payload() == {"definition": result.definition, "config": result.config}

    def test_default_clock_produces_iso_utc(self):
        result = create_diagram(PIE_REQUEST)
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", result.metadata.created_at)


def test_format_timestamp_normalises_to_utc():
    moment = datetime(2024, 1, 1, 12, 0, 0, 500000, tzinfo=timezone(timedelta(hours=2)))
    assert format_timestamp(moment) == "2024-01-01T10:00:00.500Z"
    assert format_timestamp(datetime(2024, 1, 1)) == "2024-01-01T00:00:00.000Z"


class TestDiagramService:

    def test_create_uses_bound_config_and_clock(self, fixed_clock):
        service = DiagramService(base_config=RenderConfig(theme="neutral"), clock=fixed_clock, version="3.1.0")
        result = service.create(PIE_REQUEST, {"startOnLoad": True})
        assert result.config["theme"] == "neutral"
        assert result.config["startOnLoad"] is True
        assert result.metadata.created_at == "2024-05-17T09:30:15.123Z"
        assert result.metadata.version == "3.1.0"

    def test_generate_reports_warnings(self):
        generated = DiagramService().generate({"type": "flowchart", "content": {"nodes": "A"}})
        assert generated == {
            "definition": "flowchart TD\n",
            "warnings": ["flowchart: 'nodes' is not a list; section skipped"],
        }

    def test_validate(self):
        assert not DiagramService().validate({}).is_valid
