from ringlog.cli import main


def test_main_logs_to_console_and_file(tmp_path, capsys):
    log_file = tmp_path / "app.log"
    assert main(["--log-file", str(log_file)]) == 0
    out = capsys.readouterr().out
    content = log_file.read_text(encoding="utf-8")
    assert out == content
    lines = content.splitlines()
    assert len(lines) == 8
    assert "Debugging information" not in content
    assert lines[0].endswith("[INFO] This is an info message")
    assert lines[1].endswith("[INFO] Thisisaninfomessage123")
    assert lines[-1].endswith("[CRITICAL] Thisisacriticalmessage123")


def test_main_order_of_levels(tmp_path, capsys):
    log_file = tmp_path / "app.log"
    main(["--log-file", str(log_file)])
    capsys.readouterr()
    levels = [line.split("][", 1)[1].split("]", 1)[0] for line in log_file.read_text().splitlines()]
    assert levels == ["INFO", "INFO", "WARNING", "WARNING", "ERROR", "ERROR", "CRITICAL", "CRITICAL"]


def test_main_rejects_existing_file(tmp_path, capsys):
    log_file = tmp_path / "app.log"
    log_file.write_text("Some content")
    assert main(["--log-file", str(log_file)]) == 1
    assert "exists" in capsys.readouterr().err
    assert log_file.read_text() == "Some content"