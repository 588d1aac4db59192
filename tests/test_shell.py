import io

import pytest

from memshell.shell import Shell, main, tokenize


@pytest.mark.parametrize(
    "line, expected",
    [
        ("ls", ["ls"]),
        ("  mkdir   docs  ", ["mkdir", "docs"]),
        ('append notes "hello world"', ["append", "notes", "hello world"]),
        ('a"b c"d', ["ab cd"]),
        ('""', []),
        ("", []),
        ("cat\tfile", ["cat", "file"]),
    ],
)
def test_tokenize(line, expected):
    assert tokenize(line) == expected


def test_mkdir_and_ls():
    shell = Shell()
    assert shell.execute("mkdir docs") == []
    assert shell.execute("touch readme") == []
    assert shell.execute("ls") == ["docs", "readme"]
    assert shell.execute("ls docs") == []


def test_duplicate_mkdir_reports_error():
    shell = Shell()
    shell.execute("mkdir docs")
    assert shell.execute("mkdir docs") == ["Error creating directory"]


def test_touch_in_missing_directory_reports_error():
    shell = Shell()
    assert shell.execute("touch nowhere/file") == ["Error creating file"]


def test_append_and_cat_with_quoted_content():
    shell = Shell()
    shell.execute("touch notes")
    assert shell.execute('append notes "hello world"') == []
    assert shell.execute("cat notes") == ["hello world"]
    assert shell.execute("empty notes") == []
    assert shell.execute("cat notes") == [""]


def test_file_errors():
    shell = Shell()
    shell.execute("mkdir docs")
    assert shell.execute("append docs text") == ["Error appending to file"]
    assert shell.execute("empty missing") == ["Error emptying file"]
    assert shell.execute("rm missing") == ["Error removing file"]
    assert shell.execute("rmdir missing") == ["Error removing directory"]


def test_rmdir_non_empty_fails_then_succeeds():
    shell = Shell()
    shell.execute("mkdir docs")
    shell.execute("touch docs/a")
    assert shell.execute("rmdir docs") == ["Error removing directory"]
    assert shell.execute("rm docs/a") == []
    assert shell.execute("rmdir docs") == []
    assert shell.execute("ls") == []


def test_unknown_command_and_missing_arguments():
    shell = Shell()
    assert shell.execute("frobnicate") == ["Unknown command or invalid arguments"]
    assert shell.execute("mkdir") == ["Unknown command or invalid arguments"]
    assert shell.execute("append onlyone") == ["Unknown command or invalid arguments"]


def test_blank_line_produces_nothing():
    assert Shell().execute("   ") == []


def test_cd_changes_prompt_and_ignores_bad_target():
    shell = Shell()
    shell.execute("mkdir docs")
    shell.execute("touch file")
    assert shell.execute("cd file") == []
    assert shell.prompt == "/> "
    shell.execute("cd docs")
    assert shell.prompt == "/docs> "
    shell.execute("cd ..")
    assert shell.prompt == "/> "


def test_meta_reports_file():
    shell = Shell()
    shell.execute("touch notes")
    shell.execute("append notes hello")
    lines = shell.execute("meta notes")
    assert lines[0] == "Name: notes"
    assert lines[1] == "Type: File"
    assert lines[2] == "Size: 5 bytes"
    assert lines[3].startswith("Created: ")
    assert lines[4].startswith("Modified: ")


def test_meta_missing():
    assert Shell().execute("meta missing") == ["File or directory not found"]


def test_run_session():
    stdin = io.StringIO("mkdir docs\n\ncd docs\ntouch a\nls\nexit\nls\n")
    stdout = io.StringIO()
    Shell().run(stdin, stdout)
    assert stdout.getvalue() == (
        "Type 'exit' to quit.\n"
        "/> /> /> /docs> /docs> a\n"
        "/docs> "
    )


def test_run_stops_at_end_of_input():
    shell = Shell()
    stdout = io.StringIO()
    shell.run(io.StringIO("mkdir x"), stdout)
    assert shell.fs.ls() == ["x"]
    assert stdout.getvalue().startswith("Type 'exit' to quit.\n/> ")


def test_main_runs_on_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("mkdir d\nls\nexit\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "d\n" in out
    assert out.startswith("Type 'exit' to quit.")