"""Window for choosing the two directories and running the merge."""

from __future__ import annotations

import os
import tkinter as tk
from tkinter import filedialog, messagebox, ttk

from .layout import TitleAlignment, WidgetPlacement, panel_origin, title_anchor
from .merge import MergeError, merge_directories
from .settings import DEFAULT_PATH, LastRun, load_last_run, save_last_run

WINDOW_WIDTH = 700
WINDOW_HEIGHT = 200
PANEL_WIDTH = 300
PANEL_HEIGHT = 150
PADDING = 10


def _percent(total: int, done: int) -> int:
    """Progress percentage, truncated."""
    return done * 100 // total if total else 0


class FileSelectionPanel(tk.Frame):
    """A titled form holding a directory field and a prefix field."""

    def __init__(self, master, title, placement=WidgetPlacement.LEFT, alignment=TitleAlignment.LEFT):
        super().__init__(master)
        self.placement = placement
        self.directory = tk.StringVar(self)
        self.prefix = tk.StringVar(self)

        self._inner = tk.Frame(self, width=PANEL_WIDTH, height=PANEL_HEIGHT)
        self._inner.grid_propagate(False)
        tk.Label(self._inner, text=title, anchor=title_anchor(alignment)).grid(
            row=0, column=0, columnspan=3, sticky="ew", padx=PADDING, pady=(PADDING, 0)
        )
        tk.Label(self._inner, text="文件目录: ", anchor="e").grid(row=1, column=0, sticky="e", padx=(PADDING, 0))
        entry = tk.Entry(self._inner, textvariable=self.directory)
        entry.grid(row=1, column=1, sticky="ew")
        tk.Button(self._inner, text="...", width=3, command=self._browse).grid(
            row=1, column=2, padx=(0, PADDING)
        )
        tk.Label(self._inner, text="文件前缀: ", anchor="e").grid(row=2, column=0, sticky="e", padx=(PADDING, 0))
        tk.Entry(self._inner, textvariable=self.prefix).grid(
            row=2, column=1, columnspan=2, sticky="ew", padx=(0, PADDING), pady=PADDING
        )
        self._inner.columnconfigure(1, weight=1)
        self.bind("<Configure>", self._place_inner)

    def _place_inner(self, event: tk.Event) -> None:
        x, y = panel_origin(self.placement, event.width, event.height, PANEL_WIDTH, PANEL_HEIGHT)
        self._inner.place(x=x, y=y, width=PANEL_WIDTH, height=PANEL_HEIGHT)

    def _browse(self) -> None:
        current = self.directory.get()
        initial = current if current and os.path.isdir(current) else None
        chosen = filedialog.askdirectory(parent=self, initialdir=initial)
        if chosen and os.path.isdir(chosen):
            self.directory.set(chosen)


class App:
    """Main window: target panel, source panel and a start button."""

    def __init__(self, root, settings_path=DEFAULT_PATH):
        self.root = root
        self.settings_path = settings_path
        root.title("LLC Translation Merge")
        root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        root.resizable(False, False)

        half = WINDOW_WIDTH // 2
        self.target = FileSelectionPanel(root, "目标文件", WidgetPlacement.RIGHT, TitleAlignment.CENTER)
        self.target.place(x=0, y=0, width=half, height=WINDOW_HEIGHT - 50)
        self.source = FileSelectionPanel(root, "比对文件", WidgetPlacement.LEFT, TitleAlignment.CENTER)
        self.source.place(x=half, y=0, width=half, height=WINDOW_HEIGHT - 50)

        last = load_last_run(settings_path)
        if last is not None:
            self.source.directory.set(last.src_dir)
            self.target.directory.set(last.dst_dir)
            self.source.prefix.set(last.src_prefix)
            self.target.prefix.set(last.dst_prefix)

        self.button = tk.Button(root, text="start", command=self.start)
        self.button.place(x=(WINDOW_WIDTH - 70) // 2, y=WINDOW_HEIGHT - 50 + 10, width=70, height=30)
        self.progress = ttk.Progressbar(root, maximum=100)

    def start(self) -> None:
        """Run the merge and remember the settings when it succeeds."""
        self.button.configure(state=tk.DISABLED)
        self.progress["value"] = 0
        self.progress.place(x=PADDING, y=WINDOW_HEIGHT - 60, width=WINDOW_WIDTH - 2 * PADDING, height=8)

        def report(total: int, done: int) -> None:
            self.progress["value"] = _percent(total, done)
            self.root.update()

        try:
            merge_directories(
                self.target.directory.get(), self.target.prefix.get(),
                self.source.directory.get(), self.source.prefix.get(),
                report,
            )
        except MergeError as error:
            messagebox.showwarning("错误", str(error), parent=self.root)
            return
        finally:
            self.progress.place_forget()
            self.button.configure(state=tk.NORMAL)
        save_last_run(
            LastRun(
                src_dir=self.source.directory.get(),
                dst_dir=self.target.directory.get(),
                src_prefix=self.source.prefix.get(),
                dst_prefix=self.target.prefix.get(),
            ),
            self.settings_path,
        )


def main(argv=None) -> int:
    """Open the window and run until it is closed."""
    root = tk.Tk()
    App(root)
    root.mainloop()
    return 0