from diagram_creator.generators import generate_state_diagram


def test_states_and_transitions():
    content = {
        "states": [
            {"id": "Start", "type": "start"},
            {"id": "Idle", "label": "Waiting"},
            {"id": "Busy"},
            {"id": "Done", "type": "end"},
        ],
        "transitions": [
            {"from": "[*]", "to": "Idle"},
            {"from": "Idle", "to": "Busy", "label": "job received"},
        ],
    }
    assert generate_state_diagram(content) == (
        "stateDiagram-v2\n"
        "    [*]\n"
        "    Idle : Waiting\n"
        "    Busy\n"
        "    Done --> [*]\n"
        "    [*] --> Idle\n"
        "    Idle --> Busy : job received\n"
    )


def test_composite_state_lines_are_verbatim():
    content = {"states": [
        {"id": "Active", "composite": ["[*] --> Running", "Running --> Paused"]},
    ]}
    assert generate_state_diagram(content) == (
        "stateDiagram-v2\n"
        "    state Active {\n"
        "        [*] --> Running\n"
        "        Running --> Paused\n"
        "    }\n"
    )


def test_non_list_composite_falls_back_to_simple_state(warnings):
    content = {"states": [{"id": "Active", "label": "On", "composite": "oops"}]}
    assert generate_state_diagram(content, warnings=warnings) == "stateDiagram-v2\n    Active : On\n"
    assert warnings == ["stateDiagram-v2: 'states[0].composite' is not a list; emitted as a simple state"]


def test_bundled_example(examples):
    definition = generate_state_diagram(examples["state"]["content"])
    assert "    Pending : Order Placed\n" in definition
    assert "    [*] --> Pending : New Order\n" in definition
    assert definition.endswith("    Delivered --> [*]\n")
