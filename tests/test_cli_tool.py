import os

import cli_tool


def answer(monkeypatch, *answers):
    replies = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt: next(replies))


def test_every_menu_script_exists():
    for _, script in cli_tool.SCRIPTS.values():
        assert os.path.exists(cli_tool.resource_path(script))


def test_get_user_choice_retries_until_valid(monkeypatch, capsys):
    answer(monkeypatch, "9", "2")

    assert cli_tool.get_user_choice() == cli_tool.SCRIPTS["2"]
    assert "Invalid choice" in capsys.readouterr().out


def test_get_user_choice_quit(monkeypatch):
    answer(monkeypatch, "Q")

    assert cli_tool.get_user_choice() is None


def test_prompt_post_script(monkeypatch):
    answer(monkeypatch, "x", "r")
    assert cli_tool.prompt_post_script() is True

    answer(monkeypatch, "q")
    assert cli_tool.prompt_post_script() is False


def test_run_script_returns_exit_status(tmp_path):
    script = tmp_path / "exit_two.py"
    script.write_text("import sys\nsys.exit(2)\n", encoding="utf-8")

    assert cli_tool.run_script(str(script)) == 2


def test_main_runs_chosen_script(monkeypatch):
    launched = []
    monkeypatch.setattr(cli_tool, "run_script", lambda path: launched.append(path) or 0)
    answer(monkeypatch, "1", "q")

    cli_tool.main()

    assert launched == [cli_tool.resource_path("split_single_csv.py")]
