"""Toolbar model: actions, sprite-sheet icon regions, a drop-down menu and signals."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

ICON_SIZE = 16
DROPDOWN_KEY = "picture_menu"
DROPDOWN_LABEL = "流程图"
DROPDOWN_MARGIN_TOP = 8
DROPDOWN_MARGIN_RIGHT = 7


class Signal:
    """A list of callables invoked in connection order when emitted."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., Any]) -> None:
        try:
            self._slots.remove(slot)
        except ValueError:
            raise ValueError("slot is not connected") from None

    def emit(self, *args: Any) -> None:
        for slot in list(self._slots):
            slot(*args)

    def __len__(self) -> int:
        return len(self._slots)


class SpriteSheet(Enum):
    """The image files that hold the toolbar icons, with their tile size."""

    PRIMARY = ("toolbar1.png", 64)
    SECONDARY = ("Toolbar2.png", 16)

    def __init__(self, filename: str, tile: int) -> None:
        self.filename = filename
        self.tile = tile


@dataclass(frozen=True)
class IconRegion:
    """One square tile of a sprite sheet, counted from the left."""

    sheet: SpriteSheet
    index: int

    def box(self) -> tuple[int, int, int, int]:
        """Return the (left, top, right, bottom) crop box of the tile."""
        left = self.index * self.sheet.tile
        return (left, 0, left + self.sheet.tile, self.sheet.tile)


@dataclass(frozen=True)
class ToolbarItem:
    key: str
    label: str
    icon: IconRegion
    signal: str | None


@dataclass(frozen=True)
class MenuItem:
    label: str
    signal: str


_PRIMARY = (
    ("table", "制表", "table_requested"),
    ("bak", "  ", "bak_requested"),
    ("close", "关闭窗口", "close_requested"),
    ("picture", "流程图", None),
    ("cxykxx", "查询遥控信息", "cxykxx_requested"),
)

_SECONDARY = (
    ("fullscreen", "全屏"),
    ("mainwindow", "主窗口"),
    ("systemctlpanel", "系统控制面板"),
    ("guangzipai", "光字牌"),
    ("picassistant", "图形辅助窗口"),
    ("trend", "曲线图"),
    ("barwindow", "棒图窗"),
    ("elechistogram", "电度直方图"),
    ("zoomin", "放大"),
    ("zoomout", "缩小"),
    ("move", "移动"),
    ("home", "第一幅图"),
    ("pageup", "前一幅图"),
    ("pagedown", "后一幅图"),
    ("end", "最后一幅图"),
    ("prelocation", "上一位置"),
    ("nextlocation", "下一位置"),
    ("savepiclocation", "保存画面当前存储位置"),
    ("cleanpiclocation", "清除画面当前存储位置"),
    ("piclayer", "画面层"),
    ("picviewinfo", "画面视角信息"),
    ("close2", "关闭"),
    ("printer", "打印"),
    ("about", "关于"),
    ("horn", "音响"),
    ("navigate", "导航图"),
    ("winsave", "窗口存盘"),
    ("monitor", "五防监控使能"),
    ("picswitch", "画面切换"),
    ("ykinfo", "遥控信息"),
    ("soe", "事故追忆"),
    ("piclock", "画面锁定与解锁"),
    ("check", "检查"),
    ("operationticket", "执行操作票据"),
)


def toolbar_items() -> tuple[ToolbarItem, ...]:
    """Return every toolbar action in the order it is added."""
    primary = [
        ToolbarItem(key, label, IconRegion(SpriteSheet.PRIMARY, index), signal)
        for index, (key, label, signal) in enumerate(_PRIMARY)
    ]
    secondary = [
        ToolbarItem(key, label, IconRegion(SpriteSheet.SECONDARY, index), f"{key}_requested")
        for index, (key, label) in enumerate(_SECONDARY)
    ]
    return tuple(primary + secondary)


def dropdown_items() -> tuple[MenuItem, ...]:
    """Return the entries of the flow-chart drop-down menu."""
    return (
        MenuItem("流程图01", "picture_requested"),
        MenuItem("流程图02", "picture02_requested"),
    )


class MainToolbar:
    """The main toolbar: triggering an action or menu entry emits its signal."""

    def __init__(self) -> None:
        self.items = toolbar_items()
        self.menu = dropdown_items()
        self._by_key = {item.key: item for item in self.items}
        self._by_label = {entry.label: entry for entry in self.menu}
        self._signals = {name: Signal() for name in self.signal_names()}

    def signal_names(self) -> tuple[str, ...]:
        """Return the names of all signals in declaration order."""
        head = ("table_requested", "bak_requested", "close_requested",
                "picture_requested", "picture02_requested", "cxykxx_requested")
        return head + tuple(f"{key}_requested" for key, _ in _SECONDARY)

    def signal(self, name: str) -> Signal:
        try:
            return self._signals[name]
        except KeyError:
            raise KeyError(f"unknown signal: {name}") from None

    def trigger(self, name: str) -> None:
        """Trigger the action with the given key."""
        try:
            item = self._by_key[name]
        except KeyError:
            raise KeyError(f"unknown action: {name}") from None
        if item.signal is not None:
            self._signals[item.signal].emit()

    def choose(self, label: str) -> None:
        """Choose an entry of the drop-down menu by its label."""
        try:
            entry = self._by_label[label]
        except KeyError:
            raise KeyError(f"unknown menu entry: {label}") from None
        self._signals[entry.signal].emit()

    def layout(self) -> tuple[str, ...]:
        """Return the keys of the toolbar widgets from left to right."""
        keys: list[str] = []
        for item in self.items:
            if item.key == "cxykxx":
                keys.append(DROPDOWN_KEY)
            keys.append(item.key)
        return tuple(keys)