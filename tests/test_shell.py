import pytest

from core.results import Status
from core.shell import CommandDispatcher, usage
from tests.conftest import write_face


def _scripted(lines):
    feed = iter(lines)

    def read(prompt):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError
    return read


@pytest.mark.parametrize("token,expected", [
    ("create", "create"),
    ("training", "train"),
    ("searchx", "search"),
    ("save", "save"),
    ("quit!", "quit"),
    ("se", None),
    ("help", None),
])
def test_prefix_matching(token, expected):
    assert CommandDispatcher.match_command(token) == expected


def test_unrecognized_command_prints_usage_and_continues(session, tmp_path, capsys):
    dispatcher = CommandDispatcher(session)

    result = dispatcher.dispatch("fly away")

    out = capsys.readouterr().out
    assert "Don't recognize command: fly" in out
    assert usage() in out
    assert result.status is Status.USAGE
    assert session.recognizer is None

    assert dispatcher.dispatch(f"create lbph {tmp_path / 'db'}").ok
    assert "LBPHFaceRecognizer loaded." in capsys.readouterr().out


def test_blank_line_is_ignored(session, capsys):
    assert CommandDispatcher(session).dispatch("   ") is None
    assert capsys.readouterr().out == ""


def test_missing_arguments_print_command_usage(session, capsys):
    dispatcher = CommandDispatcher(session)

    assert dispatcher.dispatch("create EIGEN").status is Status.USAGE
    assert dispatcher.dispatch("search").status is Status.USAGE

    out = capsys.readouterr().out
    assert "usage: create <EIGEN|FISHER|LBPH> <dir>" in out
    assert "usage: search <image>" in out


@pytest.mark.parametrize("line", ["exit", "quit", "exit now"])
def test_exit_terminates(session, line, capsys):
    with pytest.raises(SystemExit) as exc:
        CommandDispatcher(session).dispatch(line)

    assert exc.value.code == 0
    assert "Exiting.." in capsys.readouterr().out


def test_failures_are_reported_with_marker(session, tmp_path, capsys):
    dispatcher = CommandDispatcher(session)

    dispatcher.dispatch(f"search {tmp_path / 'missing.png'}")
    dispatcher.dispatch(f"load {tmp_path / 'model.yml'}")
    dispatcher.dispatch("save")

    out = capsys.readouterr().out
    assert f"⚠️ Can't find image at {tmp_path / 'missing.png'}" in out
    assert "⚠️ Model doesn't exist. Please create a model first." in out
    assert "Trying to load" not in out
    assert "Please provide file path to save model." in out


def test_run_session_end_to_end(session, tmp_path, capsys):
    faces = tmp_path / "faces"
    write_face(faces / "alice-7.png")
    write_face(faces / "bob-12.jpg")
    query = write_face(tmp_path / "query.png")
    model = tmp_path / "model.yml"
    dispatcher = CommandDispatcher(session, input_func=_scripted([
        f"create FISHER {tmp_path / 'db'}",
        f"train {faces}",
        f"save {model}",
        f"search {query}",
        "quit",
    ]))

    with pytest.raises(SystemExit):
        dispatcher.run()

    out = capsys.readouterr().out
    assert "FisherFaceRecognizer loaded." in out
    assert "Processing alice-7.png" in out
    assert "Trained FisherFaceRecognizer on 2 images (2 labels)" in out
    assert f"Model saved to {model}" in out
    assert "Possible match: alice" in out
    assert model.is_file()


def test_run_exits_on_end_of_input(session, capsys):
    with pytest.raises(SystemExit) as exc:
        CommandDispatcher(session, input_func=_scripted([])).run()

    assert exc.value.code == 0
    assert "Exiting.." in capsys.readouterr().out


def test_library_error_prints_traceback(session, tmp_path, capsys):
    dispatcher = CommandDispatcher(session)
    dispatcher.dispatch(f"create LBPH {tmp_path / 'db'}")
    query = write_face(tmp_path / "query.png")

    def broken_predict(image):
        raise RuntimeError("model not trained")

    session.recognizer.trained = True
    session.recognizer.model.predict = broken_predict

    result = dispatcher.dispatch(f"search {query}")

    out = capsys.readouterr().out
    assert result.status is Status.LIBRARY_ERROR
    assert "❌ Error: model not trained" in out
    assert "Traceback" in out
