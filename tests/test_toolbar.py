import pytest

from pic_hmi.toolbar import (
    DROPDOWN_KEY,
    IconRegion,
    MainToolbar,
    Signal,
    SpriteSheet,
    dropdown_items,
    toolbar_items,
)


def test_signal_emits_in_connection_order():
    calls = []
    sig = Signal()
    sig.connect(lambda x: calls.append(("a", x)))
    sig.connect(lambda x: calls.append(("b", x)))
    sig.emit(1)
    assert calls == [("a", 1), ("b", 1)]


def test_signal_disconnect():
    calls = []
    sig = Signal()
    slot = calls.append
    sig.connect(slot)
    sig.disconnect(slot)
    sig.emit("x")
    assert calls == []
    with pytest.raises(ValueError):
        sig.disconnect(slot)


def test_icon_region_boxes_follow_source():
    assert IconRegion(SpriteSheet.SECONDARY, 33).box() == (528, 0, 544, 16)
    assert IconRegion(SpriteSheet.PRIMARY, 4).box() == (256, 0, 320, 64)


def test_items_unique_and_labels():
    items = toolbar_items()
    keys = [item.key for item in items]
    assert len(keys) == len(set(keys))
    by_key = {item.key: item for item in items}
    assert by_key["operationticket"].label == "执行操作票据"
    assert by_key["picture"].signal is None


def test_trigger_emits_signal():
    bar = MainToolbar()
    seen = []
    bar.signal("zoomin_requested").connect(lambda: seen.append("zoomin"))
    bar.trigger("zoomin")
    assert seen == ["zoomin"]


def test_picture_action_emits_nothing():
    bar = MainToolbar()
    seen = []
    for name in bar.signal_names():
        bar.signal(name).connect(lambda name=name: seen.append(name))
    bar.trigger("picture")
    assert seen == []


def test_choose_menu_entries():
    bar = MainToolbar()
    seen = []
    bar.signal("picture_requested").connect(lambda: seen.append(1))
    bar.signal("picture02_requested").connect(lambda: seen.append(2))
    bar.choose("流程图01")
    bar.choose("流程图02")
    assert seen == [1, 2]
    assert [m.label for m in dropdown_items()] == ["流程图01", "流程图02"]


def test_unknown_names_raise():
    bar = MainToolbar()
    with pytest.raises(KeyError):
        bar.trigger("nope")
    with pytest.raises(KeyError):
        bar.choose("nope")
    with pytest.raises(KeyError):
        bar.signal("nope")


def test_layout_puts_dropdown_before_query():
    bar = MainToolbar()
    layout = bar.layout()
    assert layout.index(DROPDOWN_KEY) + 1 == layout.index("cxykxx")
    assert layout.index("picture") + 1 == layout.index(DROPDOWN_KEY)
    assert len(layout) == len(bar.items) + 1


def test_every_item_signal_is_declared():
    bar = MainToolbar()
    names = set(bar.signal_names())
    assert {i.signal for i in bar.items if i.signal} <= names
    assert {m.signal for m in bar.menu} <= names