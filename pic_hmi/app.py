"""Desktop entry point: a window with the toolbar and a text area."""

from __future__ import annotations

import argparse
import sys
import tkinter as tk
from pathlib import Path
from tkinter import messagebox

from PIL import Image, ImageTk

from .toolbar import DROPDOWN_KEY, DROPDOWN_LABEL, ICON_SIZE, MainToolbar, SpriteSheet
from .window import MainWindow


def load_icons(icon_dir, toolbar: MainToolbar) -> dict[str, Image.Image]:
    """Cut every action's icon out of the sprite sheets in icon_dir."""
    directory = Path(icon_dir)
    sheets: dict[SpriteSheet, Image.Image] = {}
    for sheet in SpriteSheet:
        with Image.open(directory / sheet.filename) as image:
            sheets[sheet] = image.convert("RGBA")
    return {
        item.key: sheets[item.icon.sheet].crop(item.icon.box())
        for item in toolbar.items
    }


def build_view(root, window: MainWindow, icons: dict[str, Image.Image]):
    """Lay out the toolbar and the central text area; return the toolbar frame."""
    bar = tk.Frame(root)
    bar.pack(side=tk.TOP, fill=tk.X)
    bar.images = []
    items = {item.key: item for item in window.toolbar.items}
    for key in window.toolbar.layout():
        if key == DROPDOWN_KEY:
            button = tk.Menubutton(bar, text=DROPDOWN_LABEL, relief=tk.RAISED)
            menu = tk.Menu(button, tearoff=False)
            for entry in window.toolbar.menu:
                menu.add_command(
                    label=entry.label,
                    command=lambda label=entry.label: window.toolbar.choose(label),
                )
            button["menu"] = menu
            button.pack(side=tk.LEFT, padx=(0, 7), pady=(8, 0))
            continue
        item = items[key]
        options = {"command": lambda key=key: window.toolbar.trigger(key)}
        if key in icons:
            image = icons[key].resize((ICON_SIZE, ICON_SIZE), Image.Resampling.LANCZOS)
            photo = ImageTk.PhotoImage(image, master=root)
            bar.images.append(photo)
            options["image"] = photo
        else:
            options["text"] = item.label
        tk.Button(bar, **options).pack(side=tk.LEFT)
    tk.Text(root).pack(side=tk.TOP, fill=tk.BOTH, expand=True)
    return bar


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pic-hmi", description="Plant picture HMI window.")
    parser.add_argument("--icons", type=Path, default=Path("icons"),
                        help="directory holding the toolbar sprite sheets")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    root = tk.Tk()
    root.title("SP_PIC_App")
    window = MainWindow(
        MainToolbar(),
        lambda title, question: messagebox.askyesno(title, question, parent=root),
        lambda message: print(message, file=sys.stderr),
    )
    window.describe_screen(root.winfo_screenwidth(), root.winfo_screenheight())
    try:
        icons = load_icons(args.icons, window.toolbar)
    except OSError as error:
        print(f"icons unavailable: {error}", file=sys.stderr)
        icons = {}
    build_view(root, window, icons)
    window.close_accepted.connect(root.destroy)
    root.protocol("WM_DELETE_WINDOW", window.request_close)
    root.mainloop()
    return 0