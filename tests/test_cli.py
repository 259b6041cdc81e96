"""End-to-end tests for the command line."""

from main import main


def run(capsys, *argv):
    code = main(list(argv))
    return code, capsys.readouterr().out


def test_help(project, capsys):
    code, out = run(capsys)

    assert code == 0
    assert out.startswith("These are SVCS commands:")
    assert "checkout    Restore a file." in out


def test_config(project, capsys):
    assert run(capsys, "config")[1] == "Please, tell me who you are.\n"
    assert run(capsys, "config", "alice")[1] == "The username is alice.\n"
    assert run(capsys, "config")[1] == "The username is alice.\n"


def test_add(project, capsys):
    assert run(capsys, "add")[1] == "Add a file to the index.\n"
    assert run(capsys, "add", "a.txt")[1] == "The file 'a.txt' is tracked.\n"
    assert run(capsys, "add", "nope.txt")[1] == "Can't find 'nope.txt'.\n"
    assert run(capsys, "add")[1] == "Tracked files:\na.txt\n"


def test_commit_requires_username(project, capsys):
    run(capsys, "add", "a.txt")

    assert run(capsys, "commit", "first")[1] == "Please, tell me who you are.\n"
    assert run(capsys, "log")[1] == "No commits yet.\n"


def test_commit_log_checkout(project, capsys):
    run(capsys, "config", "alice")
    run(capsys, "add", "a.txt")

    assert run(capsys, "commit")[1] == "Message was not passed.\n"
    assert run(capsys, "commit", "first")[1] == "Changes are committed.\n"
    assert run(capsys, "commit", "again")[1] == "Nothing to commit.\n"

    (project / "a.txt").write_text("world")
    run(capsys, "commit", "second")

    _, out = run(capsys, "log")
    lines = out.splitlines()
    assert lines[0].startswith("commit ")
    assert lines[1] == "Author: alice"
    assert lines[3] == "second"
    assert out.index("second") < out.index("first")

    first_id = out.split("commit ")[2].splitlines()[0]
    assert run(capsys, "checkout")[1] == "Commit id was not passed.\n"
    assert run(capsys, "checkout", "doesnotexist")[1] == "Commit does not exist.\n"
    assert run(capsys, "checkout", first_id)[1] == f"Switched to commit {first_id}.\n"
    assert (project / "a.txt").read_text() == "hello"


def test_failed_commit_exits_nonzero(project, capsys):
    run(capsys, "config", "alice")
    run(capsys, "add", "a.txt")
    (project / "a.txt").unlink()

    code = main(["commit", "first"])
    captured = capsys.readouterr()

    assert code == 1
    assert "Error: commit failed" in captured.err
    assert captured.out == ""


def test_add_from_subdirectory(project, capsys, monkeypatch):
    run(capsys, "log")
    monkeypatch.chdir(project / "docs")

    assert run(capsys, "add", "notes.md")[1] == "The file 'notes.md' is tracked.\n"
    assert run(capsys, "add")[1] == "Tracked files:\ndocs/notes.md\n"


def test_corrupt_log_is_reported(project, capsys):
    run(capsys, "log")
    (project / ".vcs" / "log.txt").write_bytes(b"\xff\xfe garbage\n")

    code = main(["checkout", "abc"])
    captured = capsys.readouterr()

    assert code == 1
    assert "Error:" in captured.err
    assert "not valid UTF-8" in captured.err
