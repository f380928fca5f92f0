# pic_hmi

An operator-station window for a substation process-picture HMI. It opens a
Tkinter window with a single toolbar holding every operator command
(tabulation, process pictures, remote-control information, full screen, alarm
tiles, trend and bar charts, zoom and pan, picture navigation, printing,
sound, five-prevention interlock monitoring, sequence-of-events recall,
operation tickets and more) above a plain text area.

## Installing

```
pip install .
```

Pillow (9.1 or later) is the only dependency; the window uses Tkinter from
the standard library.

## Running

```
pic-hmi
```

Options:

- `--icons DIR` — directory holding the toolbar sprite sheets (default:
  `icons`).

```
pic-hmi --help
```

Toolbar icons are cut from two sprite sheets in that directory:
`toolbar1.png` holds 64×64 tiles and `Toolbar2.png` holds 16×16 tiles, side
by side in one row. Every icon is shown at 16×16. If the sheets cannot be
read, a note is printed to standard error and the buttons show their labels
instead.

At start-up the screen resolution is written to standard error, and each
toolbar command writes its message there too. Closing the window (or the
"关闭窗口" button) asks "你确定要退出吗？" and only exits on "yes".

## Using the toolbar from Python

`pic_hmi.toolbar.MainToolbar` holds the toolbar's items and a `Signal` for
each command. Connect a callable to a signal and it is called whenever the
command is triggered:

```python
from pic_hmi.toolbar import MainToolbar

toolbar = MainToolbar()
toolbar.signal("table_requested").connect(lambda: print("tabulate"))
toolbar.trigger("table")          # prints "tabulate"
toolbar.choose("流程图02")         # emits "picture02_requested"
```

- `MainToolbar.signal_names()` lists every signal name (`table_requested`,
  `bak_requested`, `close_requested`, `picture_requested`,
  `picture02_requested`, `cxykxx_requested`, then `<key>_requested` for each
  16×16-icon command such as `fullscreen_requested`).
- `MainToolbar.trigger(key)` triggers the action with that key; the
  `picture` action has no signal of its own. Unknown keys raise `KeyError`.
- `MainToolbar.choose(label)` picks an entry of the process-picture drop-down
  menu ("流程图01" or "流程图02") and emits its signal.
- `MainToolbar.layout()` gives the widget keys left to right, with the
  drop-down (`picture_menu`) placed just before `cxykxx`.
- `toolbar_items()` and `dropdown_items()` describe the buttons and menu
  entries; each `ToolbarItem.icon` is an `IconRegion` whose `box()` gives the
  crop box within its `SpriteSheet`.
- `Signal` supports `connect`, `disconnect` (raises `ValueError` for a slot
  that is not connected) and `emit`.

`pic_hmi.window.MainWindow(toolbar=None, confirm_exit=None, log=...)` wires a
toolbar to the window's reactions. Each command passes its message to `log`
(by default the module's logger at debug level); `message_for(name)` returns
that message. `request_close()` calls `confirm_exit(title, question)` and,
if it returns true or no callback was given, sets `closed`, emits
`close_accepted` and returns `True`. `describe_screen(width, height)` logs
and returns the resolution line.

`pic_hmi.app` provides `load_icons`, `build_view`, `parse_args` and `main`,
which the `pic-hmi` command runs.

## What it does not do

The commands other than closing only log their message: there are no process
pictures, charts, printing, sound or remote-control functions behind them,
and the central text area is an empty editor.

## Running the tests

```
pip install .[test]
pytest
```