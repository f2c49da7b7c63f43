import logging

import pytest

from rectangles.cmdline import run_session
from rectangles.config import config, config_context, get_config


class TestCmdline:
    @pytest.fixture
    def answers(self, base_dir) -> str:
        return str(base_dir / "files" / "answers.txt")

    @pytest.fixture(autouse=True)
    def restore_log_level(self):
        logger = logging.getLogger("rectangles")
        level = logger.level
        try:
            yield
        finally:
            logger.setLevel(level)

    def test_input_file(self, answers, capsys):
        exit_code = run_session(["--input", answers])
        output = capsys.readouterr().out

        assert exit_code == 0
        assert "Enter the name of the first rectangle: rec A\n" in output
        assert "This name is already being used!" in output
        assert "Invalid input. Dimensions must be positive." in output
        assert "You have 2 rectangle(s) in your list." in output
        assert (
            "Rectangle 'B': Location is (5, 5), Length is 1, Height is 1, "
            "Area is 1, Perimeter is 4, Midpoint is located at (5.5, 5.5)\n"
            "After scale by 3: Location is (4, 4), Length is 3, Height is 3, "
            "Area is 9, Perimeter is 12, Midpoint is located at (5.5, 5.5)\n"
        ) in output

    def test_keywords(self, tmp_path, capsys):
        answers = tmp_path / "answers.txt"
        answers.write_text("add A\n1 1\n1 1\nend\n")

        run_session(
            [
                "--input",
                str(answers),
                "--add-keyword",
                "add",
                "--stop-keyword",
                "end",
            ]
        )
        output = capsys.readouterr().out

        assert "You have 1 rectangle(s) in your list." in output
        assert get_config("keyword.add") == "rec"

    @pytest.mark.parametrize(
        "args", [["--stop-keyword", ""], ["--add-keyword", "a b"]]
    )
    def test_invalid_keyword(self, answers, args, capsys):
        with pytest.raises(SystemExit) as e:
            run_session(["--input", answers] + args)

        assert e.value.code == 2
        assert "must be a single non-empty word" in capsys.readouterr().err

    def test_invalid_log_level(self, answers, monkeypatch, capsys):
        # an invalid RECTANGLES_LOG_LEVEL ends up in the defaults unchecked
        monkeypatch.setitem(config, "logging.level", "LOUD")

        with pytest.raises(SystemExit) as e:
            run_session(["--input", answers])

        assert e.value.code == 2
        assert "must be a logging level name" in capsys.readouterr().err

    def test_verbose(self, answers, caplog):
        run_session(["--input", answers, "--verbose"])

        messages = [record.getMessage() for record in caplog.records]
        assert "Added rectangle 'A' (1 in list)" in messages
        assert "Added rectangle 'B' (2 in list)" in messages
        assert any(
            message.startswith("Rejected input 'rec A'") for message in messages
        )

    def test_default_log_level_hides_debug(self, answers, caplog):
        with config_context("logging.level", "WARNING"):
            run_session(["--input", answers])

        assert not [
            record
            for record in caplog.records
            if record.levelno < logging.WARNING
            and record.name.startswith("rectangles")
        ]

    def test_log_level_from_config(self, answers, caplog):
        with config_context("logging.level", "debug"):
            run_session(["--input", answers])

        assert "Added rectangle 'A' (1 in list)" in [
            record.getMessage() for record in caplog.records
        ]
