import json

import pytest

import main
from apitester.core.config import settings
from apitester.services import environment_service


def test_no_command_prints_help_and_hint(capsys):
    main.main([])

    output = capsys.readouterr().out
    assert "interactive" in output
    assert 'Use the "interactive" command to start testing APIs!' in output


def test_run_with_unparsable_suite_exits_non_zero(tmp_path, capsys):
    suite = tmp_path / "suite.json"
    suite.write_text("{broken")

    with pytest.raises(SystemExit) as exc_info:
        main.main(["run", str(suite)])

    assert exc_info.value.code == 1
    assert "Failed to parse test suite" in capsys.readouterr().out


def test_report_command_reads_configured_report(tmp_path, monkeypatch, capsys):
    report = tmp_path / "api_test_report.json"
    report.write_text(
        json.dumps([{"name": "t1", "passed": True, "result": {"status": 200}}])
    )
    monkeypatch.setattr(settings, "storage__report_file", str(report))

    main.main(["report"])

    output = capsys.readouterr().out
    assert "t1: Passed" in output
    assert "Total: 1, Passed: 1" in output


def test_build_parser_requires_file_for_run():
    with pytest.raises(SystemExit):
        main.build_parser().parse_args(["run"])


def test_ctrl_c_says_goodbye_and_exits_130(monkeypatch, capsys):
    async def interrupted(args):
        raise KeyboardInterrupt

    monkeypatch.setitem(main.COMMANDS, "interactive", interrupted)

    with pytest.raises(SystemExit) as exc_info:
        main.main(["interactive"])

    assert exc_info.value.code == 130
    assert "Goodbye!" in capsys.readouterr().out


def test_save_command_persists_named_environment(tmp_path, monkeypatch, capsys):
    env_file = tmp_path / "envs.json"
    answers = iter(["https://staging.example.com", "secret-key"])

    class ScriptedPrompter:
        async def text(self, message, default=""):
            return next(answers)

        async def select(self, message, choices):
            return next(answers)

    monkeypatch.setattr(settings, "storage__env_file", str(env_file))
    monkeypatch.setattr(environment_service, "QuestionaryPrompter", ScriptedPrompter)

    main.main(["save", "staging"])

    assert json.loads(env_file.read_text()) == {
        "staging": {"baseUrl": "https://staging.example.com", "apiKey": "secret-key"}
    }
    assert 'Environment "staging" saved!' in capsys.readouterr().out
