import pytest

from review_assigner import main


class TestMainInProcess:
    def test_main_single_table(self, temp_single_pool, capsys):
        main(["-i", temp_single_pool, "-s", "1"])

        out = capsys.readouterr().out
        assert "Alice(E1)" in out
        assert "Successfully assigned 4 reviewers" in out

    def test_main_dual_markdown(self, temp_dual_pool, tmp_path, capsys):
        main(["-i", temp_dual_pool, "-f", "markdown", "-o", str(tmp_path), "-s", "2"])

        files = list(tmp_path.glob("review_summary_*.md"))
        assert len(files) == 1
        content = files[0].read_text(encoding="utf-8")
        assert "| Reviewees covered | **5** |" in content
        assert "Output written to:" in capsys.readouterr().out

    def test_main_yaml_export(self, temp_dual_pool, tmp_path):
        main(["-i", temp_dual_pool, "-f", "yaml", "-o", str(tmp_path)])

        assert len(list(tmp_path.glob("code_review_assignments_*.yaml"))) == 1

    def test_main_same_seed_same_output(self, temp_single_pool, capsys):
        main(["-i", temp_single_pool, "-s", "77"])
        first = capsys.readouterr().out
        main(["-i", temp_single_pool, "-s", "77"])
        second = capsys.readouterr().out
        assert first == second

    def test_main_validation_error_exits(self, tmp_path):
        path = tmp_path / "team.json"
        path.write_text('{"people": [{"name": "Alice", "employeeId": "E1"}]}')

        with pytest.raises(SystemExit) as exc_info:
            main(["-i", str(path)])
        assert exc_info.value.code == 1

    def test_main_validate_exits_zero(self, temp_single_pool, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["-i", temp_single_pool, "--validate"])
        assert exc_info.value.code == 0
        assert "Status: PASSED" in capsys.readouterr().out

    def test_main_validate_reports_bad_entry(self, tmp_path, capsys):
        path = tmp_path / "team.json"
        path.write_text('{"people": [{"name": "Alice", "employeeId": "E1"}, {"name": "Bob", "employeeId": " "}]}')

        with pytest.raises(SystemExit) as exc_info:
            main(["-i", str(path), "--validate"])

        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "=== Input Validation ===" in out
        assert "✗ people entry 2: Person 'Bob' has an empty employeeId" in out
        assert "Status: FAILED (1 error)" in out
