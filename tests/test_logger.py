from dragkit.logger import DragLogger


def test_setup_writes_header(tmp_path):
    log_file = tmp_path / "log.md"
    DragLogger(str(log_file))
    text = log_file.read_text(encoding="utf-8")
    assert text.startswith("# Drag Session Log")
    assert "| Timestamp | Position (x,y) | Event | Details |" in text


def test_log_press_and_release(tmp_path):
    log_file = tmp_path / "log.md"
    logger = DragLogger(str(log_file))
    logger.log_press((15, 15.5), True, "entity A")
    logger.log_release((30, 30))
    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert lines[-2].endswith("| (15, 15.5) | GRAB | entity A |")
    assert lines[-1].endswith("| (30, 30) | DROP |  |")


def test_unwritable_log_is_reported_not_raised(tmp_path, capsys):
    logger = DragLogger(str(tmp_path / "missing" / "log.md"))
    logger.log_press((0, 0), False)
    out = capsys.readouterr().out
    assert "Failed to initialize log file" in out
    assert "Failed to log miss" in out
