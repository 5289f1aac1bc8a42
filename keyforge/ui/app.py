"""KeyForgeApp - main GUI application (Tkinter / ttkbootstrap)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from keyforge.config import Config, Settings
from keyforge.core.generator import GenerationConfig
from keyforge.core.session import GeneratorSession
from keyforge.ui.ttk_compat import ttk
from keyforge.ui.views import build_main_view, show_history, show_password, show_strength

logger = logging.getLogger("keyforge.ui")


class KeyForgeApp(ttk.Window):
    """Main GUI application, wired to a GeneratorSession."""

    def __init__(
        self,
        settings: Settings,
        data_dir: Path,
        session: Optional[GeneratorSession] = None,
    ):
        super().__init__(themename="superhero")

        self.title("KeyForge")
        self.geometry("520x520")
        self.resizable(False, False)

        self.settings = settings
        self.data_dir = data_dir
        self.session = session or GeneratorSession()
        self._clear_job = None

        build_main_view(self)

        for observer in (show_password, show_strength, show_history):
            self.session.subscribe(lambda result, fn=observer: fn(self, result))

        # Start with a password so the output is never blank
        self._on_generate()

    # -------------------------------------------------------- helpers
    def _current_config(self) -> GenerationConfig:
        length = Config.clamp_length(self.var_length.get())
        names = [name for name, var in self.class_vars.items() if var.get()]
        return GenerationConfig.from_names(length, names)

    def _copy_text(self, text: str) -> None:
        if not text:
            return
        self.clipboard_clear()
        self.clipboard_append(text)
        # Auto-clear clipboard after timeout
        if self._clear_job is not None:
            self.after_cancel(self._clear_job)
        self._clear_job = self.after(Config.CLIPBOARD_TIMEOUT * 1000, self._clear_clipboard)

    def _clear_clipboard(self) -> None:
        self._clear_job = None
        self.clipboard_clear()

    # -------------------------------------------------------- callbacks
    def _on_generate(self, *_):
        config = self._current_config()
        try:
            self.session.generate(config)
        except ValueError as exc:
            logger.error("Generation rejected: %s", exc)

    def _on_copy(self, *_):
        self._copy_text(self.var_pwd.get())

    def _on_copy_history(self, *_):
        sel = self.lst_history.curselection()
        if sel:
            self._copy_text(self.lst_history.get(sel[0]))

    def _on_clear(self, *_):
        self.clipboard_clear()
        self.var_pwd.set("")
        self.bar["value"] = 0
        self.lbl.config(text="Strength")

    # -------------------------------------------------------- cleanup
    def _remember_settings(self) -> None:
        config = self._current_config()
        self.settings.length = config.length
        self.settings.classes = tuple(
            name for name, var in self.class_vars.items() if var.get()
        )
        self.settings.save(self.data_dir)

    def destroy(self):
        try:
            if hasattr(self, "class_vars"):
                self._remember_settings()
            self.clipboard_clear()
            if hasattr(self, "var_pwd"):
                self.var_pwd.set("")
            if hasattr(self, "session"):
                self.session.close()
        except Exception as exc:
            logger.error("Error during cleanup: %s", exc)
        finally:
            super().destroy()
