import pytest

import tui
from core.query import Query


@pytest.fixture(autouse=True)
def no_logging_setup(mocker):
    mocker.patch("tui.setup_logging")


def test_broken_config_exits_with_message(tmp_path, mocker, capsys):
    path = tmp_path / "config.yaml"
    path.write_text("quality: [720p\n")
    mocker.patch("sys.argv", ["movies-tui", "--config", str(path)])
    app = mocker.patch("tui.MoviesApp")

    with pytest.raises(SystemExit) as exc:
        tui.main()

    assert exc.value.code == 1
    assert "Config error" in capsys.readouterr().err
    app.assert_not_called()


def test_flags_override_settings(tmp_path, mocker):
    path = tmp_path / "config.yaml"
    path.write_text("quality: 720p\n")
    mocker.patch("sys.argv", ["movies-tui", "--config", str(path), "-qual", "2160p", "Heat"])
    app = mocker.patch("tui.MoviesApp")

    tui.main()

    options = app.call_args.args[0]
    assert options.query == Query(quality="2160p", query_term="Heat")
    app.return_value.run.assert_called_once_with()
