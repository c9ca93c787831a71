import logging
import os
import sys
import tkinter as tk
from tkinter import ttk

from PIL import ImageTk

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from cloudsketch.core.events import GenerateCirrus, GenerateCumulus, Resize, SavePng, ToggleOrigin
from cloudsketch.shared.theme import load_theme
from cloudsketch.ui.studio import CloudStudio

THEME_PATH = os.path.join(REPO_ROOT, "cloud_theme.json")
EXPORT_PATH = os.path.join(REPO_ROOT, "cloud.png")


class CloudStudioApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Cloud Sketch")
        self.geometry("1000x760")

        self.theme = load_theme(THEME_PATH)
        self.studio = CloudStudio.for_viewport(960, theme=self.theme)
        self.show_origin = tk.BooleanVar(value=self.studio.session.show_origin)

        self.controls = ttk.Frame(self)
        self.controls.grid(row=0, column=0, sticky="ew", padx=10, pady=(10, 6))
        ttk.Button(self.controls, text="Generate Cumulus", command=lambda: self._dispatch(GenerateCumulus())).grid(
            row=0, column=0, padx=(0, 6), sticky="w"
        )
        ttk.Button(self.controls, text="Generate Cirrus", command=lambda: self._dispatch(GenerateCirrus())).grid(
            row=0, column=1, padx=(0, 6), sticky="w"
        )
        ttk.Button(self.controls, text="Save PNG", command=self._save).grid(row=0, column=2, padx=(0, 12), sticky="w")
        ttk.Checkbutton(
            self.controls,
            text="Show origin",
            variable=self.show_origin,
            command=lambda: self._dispatch(ToggleOrigin()),
        ).grid(row=0, column=3, sticky="w")

        self.preview = ttk.Label(self)
        self.preview.grid(row=1, column=0, sticky="nsew", padx=10, pady=10)
        self.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

        self.status = ttk.Label(self, text="", anchor="w")
        self.status.grid(row=2, column=0, sticky="ew", padx=10, pady=(0, 4))

        help_text = "Keys: C = Cumulus, R = Cirrus, S = Save PNG, O = Toggle origin, Q = Quit"
        self.help = ttk.Label(self, text=help_text, justify="left", anchor="w")
        self.help.grid(row=3, column=0, sticky="ew", padx=10, pady=(0, 10))

        self.bind("c", lambda _e: self._dispatch(GenerateCumulus()))
        self.bind("r", lambda _e: self._dispatch(GenerateCirrus()))
        self.bind("s", lambda _e: self._save())
        self.bind("o", lambda _e: self._toggle_origin_key())
        self.bind("q", lambda _e: self.destroy())
        self.preview.bind("<Configure>", self._on_configure)

        self._last_viewport = None
        self._dispatch(GenerateCumulus())

    def _toggle_origin_key(self):
        self.show_origin.set(not self.show_origin.get())
        self._dispatch(ToggleOrigin())

    def _on_configure(self, event):
        width = max(1, int(event.width))
        if width == self._last_viewport:
            return
        self._last_viewport = width
        self._dispatch(Resize(width))

    def _save(self):
        path = self.studio.handle(SavePng(EXPORT_PATH))
        self.status.configure(text=f"saved {path}")

    def _dispatch(self, ev):
        self.studio.handle(ev)
        self._render()

    def _render(self):
        self._photo = ImageTk.PhotoImage(self.studio.image)
        self.preview.configure(image=self._photo)

        res = self.studio.last_result
        if res is not None:
            self.status.configure(
                text=(
                    f"kind={res.kind.value} seed={res.seed} origin=({res.origin.x:.0f}, {res.origin.y:.0f}) "
                    f"canvas={self.studio.canvas.width}x{self.studio.canvas.height} "
                    f"origin_cross={self.studio.session.show_origin}"
                )
            )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    CloudStudioApp().mainloop()
