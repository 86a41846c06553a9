import logging

from stellarevolution.logging_config import setup_logging


def test_setup_is_idempotent():
    setup_logging(level=logging.DEBUG)
    setup_logging(level=logging.DEBUG)
    logger = logging.getLogger("stellarevolution")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_log_file(tmp_path):
    log_file = tmp_path / "sim.log"
    setup_logging(level=logging.INFO, log_file=str(log_file))
    logging.getLogger("stellarevolution.controller.clock").info("phase transition")
    for handler in logging.getLogger("stellarevolution").handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized." in text
    assert "phase transition" in text
    for handler in logging.getLogger("stellarevolution").handlers:
        handler.close()
    logging.getLogger("stellarevolution").handlers.clear()


def _close_handlers():
    logger = logging.getLogger("stellarevolution")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


def test_console_hides_tick_records(capsys):
    setup_logging(level=logging.DEBUG)
    clock_logger = logging.getLogger("stellarevolution.controller.clock")
    clock_logger.debug("Tick 7: age=70.00 Myr", extra={"tick": True})
    clock_logger.debug("Phase transition: main-sequence -> red-giant")
    out = capsys.readouterr().out
    assert "Tick 7" not in out
    assert "Phase transition" in out
    _close_handlers()


def test_console_shows_ticks_on_request(capsys):
    setup_logging(level=logging.DEBUG, show_ticks=True)
    logging.getLogger("stellarevolution.controller.clock").debug(
        "Tick 7: age=70.00 Myr", extra={"tick": True}
    )
    assert "Tick 7" in capsys.readouterr().out
    _close_handlers()


def test_log_file_keeps_tick_records(tmp_path):
    log_file = tmp_path / "ticks.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    logging.getLogger("stellarevolution.controller.clock").debug(
        "Tick 3: age=30.00 Myr", extra={"tick": True}
    )
    for handler in logging.getLogger("stellarevolution").handlers:
        handler.flush()
    assert "Tick 3" in log_file.read_text(encoding="utf-8")
    _close_handlers()
