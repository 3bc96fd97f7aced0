from __future__ import annotations

import io
import tkinter as tk
from typing import Optional

from PIL import Image, ImageTk

from ..conversion import DecodedImage
from ..settings import ViewerSettings
from .layout import fit_size


class ImagePreview(tk.Tk):
    def __init__(self, decoded: DecodedImage, settings: Optional[ViewerSettings] = None) -> None:
        super().__init__()
        self.settings = settings or ViewerSettings()
        self.image_width = decoded.width
        self.image_height = decoded.height
        with Image.open(io.BytesIO(decoded.png)) as img:
            self._image = img.convert("RGB")
        self._photo: Optional[ImageTk.PhotoImage] = None

        self.title(self.settings.title)
        self.geometry(f"{decoded.width}x{decoded.height}")
        self.resizable(self.settings.resizable, self.settings.resizable)

        self.canvas = tk.Canvas(self, width=decoded.width, height=decoded.height, highlightthickness=0)
        self.canvas.pack(fill=tk.BOTH, expand=True)
        # re-render whenever the canvas changes size
        self.canvas.bind("<Configure>", self._on_configure)

    def _on_configure(self, event: tk.Event) -> None:
        self.render(event.width, event.height)

    def render(self, available_w: int, available_h: int) -> None:
        if available_w <= 0 or available_h <= 0:
            return
        aspect_ratio = self.image_width / self.image_height
        width, height = fit_size(available_w, available_h, aspect_ratio)
        size = (max(1, int(width)), max(1, int(height)))
        if size == self._image.size:
            scaled = self._image
        else:
            scaled = self._image.resize(size, Image.NEAREST)
        self._photo = ImageTk.PhotoImage(scaled)
        self.canvas.delete("all")
        self.canvas.create_image(0, 0, anchor=tk.NW, image=self._photo)


def show_image(decoded: DecodedImage, settings: Optional[ViewerSettings] = None) -> None:
    app = ImagePreview(decoded, settings)
    app.mainloop()
