"""Main window logic: reacting to toolbar signals and confirming exit."""

from __future__ import annotations

import functools
import logging
from typing import Callable

from .toolbar import MainToolbar, Signal, SpriteSheet, toolbar_items

EXIT_TITLE = "退出确认"
EXIT_QUESTION = "你确定要退出吗？"

_logger = logging.getLogger(__name__)

MESSAGES: dict[str, str] = {
    "table_requested": "制表",
    "bak_requested": "空白",
    "picture_requested": "打开PIC",
    "picture02_requested": "打开PIC02",
    "cxykxx_requested": "查询遥控信息",
    **{
        item.signal: item.label
        for item in toolbar_items()
        if item.icon.sheet is SpriteSheet.SECONDARY and item.signal
    },
}


class MainWindow:
    """Connects a toolbar to the window's reactions."""

    def __init__(
        self,
        toolbar: MainToolbar | None = None,
        confirm_exit: Callable[[str, str], bool] | None = None,
        log: Callable[[str], None] = _logger.debug,
    ) -> None:
        self.toolbar = toolbar if toolbar is not None else MainToolbar()
        self.confirm_exit = confirm_exit
        self.log = log
        self.closed = False
        self.close_accepted = Signal()
        for name in MESSAGES:
            self.toolbar.signal(name).connect(functools.partial(self._announce, name))
        self.toolbar.signal("close_requested").connect(self.request_close)

    def _announce(self, signal_name: str) -> None:
        self.log(MESSAGES[signal_name])

    def message_for(self, signal_name: str) -> str:
        try:
            return MESSAGES[signal_name]
        except KeyError:
            raise KeyError(f"no message for signal: {signal_name}") from None

    def request_close(self) -> bool:
        """Ask for confirmation and close when it is given.

        Without a confirmation callback the close is accepted at once.
        """
        if self.confirm_exit is None or self.confirm_exit(EXIT_TITLE, EXIT_QUESTION):
            self.closed = True
            self.close_accepted.emit()
            return True
        return False

    def describe_screen(self, width: int, height: int) -> str:
        text = f"分辨率： {width} x {height}"
        self.log(text)
        return text