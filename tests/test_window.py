import pytest

from pic_hmi.toolbar import MainToolbar
from pic_hmi.window import EXIT_QUESTION, EXIT_TITLE, MainWindow


def make(confirm=True):
    logged = []
    asked = []

    def confirm_exit(title, question):
        asked.append((title, question))
        return confirm

    window = MainWindow(MainToolbar(), confirm_exit, logged.append)
    return window, logged, asked


def test_toolbar_action_logs_message():
    window, logged, _ = make()
    window.toolbar.trigger("zoomin")
    window.toolbar.trigger("table")
    assert logged == ["放大", "制表"]


def test_menu_entries_log_messages():
    window, logged, _ = make()
    window.toolbar.choose("流程图02")
    assert logged == ["打开PIC02"]


def test_close_refused():
    window, _, asked = make(confirm=False)
    accepted = []
    window.close_accepted.connect(lambda: accepted.append(True))
    window.toolbar.trigger("close")
    assert window.closed is False
    assert accepted == []
    assert asked == [(EXIT_TITLE, EXIT_QUESTION)]


def test_close_confirmed():
    window, _, _ = make(confirm=True)
    accepted = []
    window.close_accepted.connect(lambda: accepted.append(True))
    assert window.request_close() is True
    assert window.closed is True
    assert accepted == [True]


def test_close2_only_logs():
    window, logged, asked = make()
    window.toolbar.trigger("close2")
    assert logged == ["关闭"]
    assert asked == []
    assert window.closed is False


def test_message_for():
    window, _, _ = make()
    assert window.message_for("bak_requested") == "空白"
    with pytest.raises(KeyError):
        window.message_for("close_requested")


def test_every_signal_but_close_has_message():
    window, _, _ = make()
    for name in window.toolbar.signal_names():
        if name != "close_requested":
            assert window.message_for(name)


def test_describe_screen_logs():
    window, logged, _ = make()
    text = window.describe_screen(800, 600)
    assert "800" in text and "600" in text
    assert logged == [text]