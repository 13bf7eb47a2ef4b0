from types import SimpleNamespace

import pytest

from diagram_creator.core.exceptions import InvalidDiagramDataError
from diagram_creator.models.render_config import FlowchartOptions, RenderConfig


def test_default_configuration():
    assert RenderConfig().to_dict() == {
        "theme": "default",
        "startOnLoad": False,
        "securityLevel": "loose",
        "fontFamily": '"trebuchet ms", verdana, arial, sans-serif',
        "flowchart": {"htmlLabels": True, "curve": "basis"},
        "sequence": {
            "diagramMarginX": 50,
            "diagramMarginY": 10,
            "actorMargin": 50,
            "width": 150,
            "height": 65,
        },
    }


def test_merge_does_not_mutate_defaults():
    config = RenderConfig()
    merged = config.merge({"sequence": {"width": 200}})
    merged["flowchart"]["curve"] = "linear"

    assert merged["sequence"] == {"width": 200}
    assert config.to_dict()["flowchart"]["curve"] == "basis"
    assert config.to_dict()["sequence"]["width"] == 150


def test_merge_without_overrides():
    assert RenderConfig().merge(None) == RenderConfig().to_dict()
    assert RenderConfig().merge({}) == RenderConfig().to_dict()


def test_from_settings():
    settings = SimpleNamespace(
        theme="dark",
        security_level="strict",
        font_family="monospace",
        flowchart_html_labels=False,
        flowchart_curve="linear",
    )
    config = RenderConfig.from_settings(settings)
    assert config.theme == "dark"
    assert config.security_level == "strict"
    assert config.font_family == "monospace"
    assert config.flowchart == FlowchartOptions(html_labels=False, curve="linear")


@pytest.mark.parametrize("overrides", [[("theme", "dark")], "dark", 5])
def test_merge_rejects_non_mapping_overrides(overrides):
    with pytest.raises(InvalidDiagramDataError) as exc_info:
        RenderConfig().merge(overrides)
    assert exc_info.value.errors == ["Rendering config must be an object"]
