import zipfile

from loguru import logger

from bmsearch import search
from bmsearch.core.logging import setup_logger


def test_library_is_silent_until_configured():
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")

    search("ABC", "")
    assert messages == []

    logger.remove(handler_id)


def test_setup_logger_enables_package_logs():
    setup_logger(level="DEBUG")
    messages = []
    logger.add(messages.append, level="DEBUG", format="{message}")

    search("ABC", "")
    assert any("No search performed" in m for m in messages)


def test_setup_logger_writes_the_log_file(tmp_path):
    log_file = tmp_path / "bmsearch.log"
    setup_logger(level="INFO", log_file=str(log_file))

    search("AB", "ABC")
    # closing the sink compresses the file
    logger.remove()

    (archive,) = tmp_path.glob("*.zip")
    with zipfile.ZipFile(archive) as z:
        logged = "".join(z.read(name).decode() for name in z.namelist())
    assert "Pattern is empty or longer than the text" in logged
