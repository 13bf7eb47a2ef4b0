from diagram_creator.generators import generate_gantt


class TestGenerateGantt:

    def test_sections_and_tasks(self):
        content = {
            "title": "Launch",
            "dateFormat": "YYYY-MM-DD",
            "sections": [{
                "name": "Design",
                "tasks": [
                    {"name": "Wireframes", "id": "t1", "start": "2024-01-01", "duration": "7d"},
                    {"name": "Review", "id": "t2", "start": "2024-01-08", "duration": "1d",
                     "status": "milestone"},
                ],
            }],
        }
        assert generate_gantt(content) == (
            "gantt\n"
            "    title Launch\n"
            "    dateFormat YYYY-MM-DD\n"
            "\n"
            "    section Design\n"
            "        Wireframes           :t1 2024-01-01, 7d\n"
            "        Review           :milestone,t2 2024-01-08, 1d\n"
        )

    def test_defaults(self):
        assert generate_gantt({}) == (
            "gantt\n"
            "    title Project Schedule\n"
            "    dateFormat YYYY-MM-DD\n"
        )

    def test_end_used_when_duration_missing(self):
        content = {"sections": [{"name": "S", "tasks": [
            {"name": "T", "start": "2024-01-01", "end": "2024-01-05"},
        ]}]}
        assert generate_gantt(content).splitlines()[-1] == "        T           : 2024-01-01, 2024-01-05"

    def test_request_date_format_is_a_fallback(self):
        assert "    dateFormat DD-MM-YYYY\n" in generate_gantt({}, "DD-MM-YYYY")
        content = {"dateFormat": "YYYY"}
        assert "    dateFormat YYYY\n" in generate_gantt(content, "DD-MM-YYYY")

    def test_every_section_preceded_by_blank_line(self, examples):
        lines = generate_gantt(examples["gantt"]["content"]).splitlines()
        section_indexes = [i for i, line in enumerate(lines) if line.startswith("    section ")]
        assert len(section_indexes) == 4
        assert all(lines[i - 1] == "" for i in section_indexes)
