import json

import pytest

from diagram_creator.cli import main


def test_example_prints_definition(capsys):
    assert main(["--example", "pie"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("pie showData\n    title Monthly Budget Breakdown\n")
    assert "    \"Housing\" : 35\n" in out


def test_input_file_with_json_output(tmp_path, capsys):
    input_file = tmp_path / "diagram.json"
    input_file.write_text(json.dumps({
        "type": "flowchart",
        "direction": "LR",
        "content": {"nodes": [{"id": "A"}], "links": []},
        "config": {"theme": "dark"},
    }))

    assert main([str(input_file), "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["definition"] == "flowchart LR\n    A[A]\n"
    assert data["config"]["theme"] == "dark"
    assert data["title"] == "Untitled Diagram"


def test_output_file(tmp_path):
    output = tmp_path / "diagram.mmd"
    assert main(["--example", "mindmap", "--output", str(output)]) == 0
    assert output.read_text(encoding="utf-8").startswith("mindmap\n  Software Architecture\n")


def test_invalid_data_exits_with_error(tmp_path, capsys):
    input_file = tmp_path / "bad.json"
    input_file.write_text(json.dumps({"title": "no type"}))

    assert main([str(input_file)]) == 1
    assert "Error: Invalid diagram data: Diagram type is required" in capsys.readouterr().err


def test_unsupported_type_exits_with_error(tmp_path, capsys):
    input_file = tmp_path / "timeline.json"
    input_file.write_text(json.dumps({"type": "timeline", "content": {"events": []}}))

    assert main([str(input_file)]) == 1
    assert "cannot be generated from structured content" in capsys.readouterr().err


def test_missing_file(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path / "missing.json")])
    assert exc_info.value.code == 1


def test_malformed_json(tmp_path, capsys):
    input_file = tmp_path / "broken.json"
    input_file.write_text("{not json")
    with pytest.raises(SystemExit):
        main([str(input_file)])
    assert "Invalid JSON" in capsys.readouterr().err


def test_warnings_go_to_stderr(tmp_path, capsys):
    input_file = tmp_path / "pie.json"
    input_file.write_text(json.dumps({"type": "pie", "content": {"data": "oops"}}))

    assert main([str(input_file)]) == 0
    captured = capsys.readouterr()
    assert captured.out == "pie showData\n    title Pie Chart\n"
    assert "Warning: pie: 'data' is not a list; section skipped" in captured.err


def test_list_examples(capsys):
    assert main(["--list-examples"]) == 0
    out = capsys.readouterr().out
    assert "gantt" in out
    assert "raw" in out


def test_requires_input():
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2


def test_non_object_config_exits_with_error(tmp_path, capsys):
    input_file = tmp_path / "pie.json"
    input_file.write_text(json.dumps({"type": "pie", "content": {}, "config": [["a", 1], ["b"]]}))

    assert main([str(input_file)]) == 1
    assert "Error: Invalid diagram data: Rendering config must be an object" in capsys.readouterr().err
