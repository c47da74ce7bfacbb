import json

import yaml

from review_assigner import (
    Person,
    display_width,
    format_assignment_table,
    format_output_json,
    format_output_yaml,
    left_align,
    print_assignments,
    right_align,
)


ALICE = Person("Alice", "E2")
BOB = Person("Bob", "E1")
ZHANG = Person("张伟", "E3")


class TestDisplayWidth:
    def test_ascii(self):
        assert display_width("Alice") == 5

    def test_cjk(self):
        assert display_width("张伟") == 4

    def test_full_width_forms(self):
        assert display_width("ＡＢ") == 4

    def test_cjk_punctuation(self):
        assert display_width("。") == 2

    def test_mixed(self):
        assert display_width("张伟(E3)") == 8

    def test_empty_and_none(self):
        assert display_width("") == 0
        assert display_width(None) == 0


class TestAlign:
    def test_left_align_pads_by_display_width(self):
        assert left_align("张伟", 6) == "张伟  "

    def test_left_align_never_truncates(self):
        assert left_align("Alice", 3) == "Alice"

    def test_right_align(self):
        assert right_align("E1", 5) == "   E1"

    def test_right_align_none(self):
        assert right_align(None, 2) == "  "


class TestAssignmentTable:
    def test_table_contains_rows(self):
        table = format_assignment_table({ALICE: [BOB], BOB: [ALICE, ZHANG]})
        lines = table.splitlines()
        assert lines[0].startswith("Reviewer")
        assert set(lines[1]) == {"─"}
        assert len(lines[1]) == 50
        assert "Alice(E2), 张伟(E3)" in table
        assert "2 reviewers assigned" in lines[-1]

    def test_table_columns_line_up_with_cjk(self):
        table = format_assignment_table({ZHANG: [ALICE], ALICE: [ZHANG]})
        zhang_row, alice_row = table.splitlines()[2:4]
        assert display_width(zhang_row[:zhang_row.index("Alice(E2)")]) == 11
        assert display_width(alice_row[:alice_row.index("张伟(E3)")]) == 11

    def test_print_assignments(self, capsys):
        print_assignments({ALICE: [BOB]})
        assert "Alice(E2)" in capsys.readouterr().out


class TestFormatOutput:
    def test_json_sorted_by_reviewer_id(self):
        output = format_output_json({ALICE: [BOB], BOB: [ALICE]}, {"input": "team.json", "mode": "single", "seed": 3})
        data = json.loads(output)
        assert "generated_at" in data
        assert data["parameters"] == {"input": "team.json", "mode": "single", "seed": 3}
        assert [a["reviewer"]["employeeId"] for a in data["assignments"]] == ["E1", "E2"]
        assert data["assignments"][0]["reviewees"] == [{"name": "Alice", "employeeId": "E2"}]
        assert data["summary"]["covered_reviewees"] == 2

    def test_json_keeps_unicode(self):
        output = format_output_json({ZHANG: [ALICE]}, {})
        assert "张伟" in output

    def test_yaml(self):
        output = format_output_yaml({ALICE: [BOB, ZHANG]}, {"mode": "dual"})
        data = yaml.safe_load(output)
        assert data["parameters"]["mode"] == "dual"
        assert data["summary"]["tasks"] == 2
        assert data["assignments"][0]["reviewees"][1]["name"] == "张伟"
