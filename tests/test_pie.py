from diagram_creator.generators import generate_pie


def test_slices():
    content = {"title": "T", "data": [{"label": "A", "value": 1}, {"label": "B", "value": 2}]}
    assert generate_pie(content) == "pie showData\n    title T\n    \"A\" : 1\n    \"B\" : 2\n"


def test_default_title_and_float_values():
    content = {"data": [{"label": "Half", "value": 50.0}, {"label": "Rest", "value": 49.5}]}
    assert generate_pie(content) == (
        "pie showData\n"
        "    title Pie Chart\n"
        "    \"Half\" : 50\n"
        "    \"Rest\" : 49.5\n"
    )


def test_no_data():
    assert generate_pie({"title": "Empty"}) == "pie showData\n    title Empty\n"
