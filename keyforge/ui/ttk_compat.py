"""Compatibility layer for ttkbootstrap API differences across versions."""

from __future__ import annotations

import tkinter as tk
import warnings
from tkinter import ttk as tk_ttk

with warnings.catch_warnings():
    # Some ttkbootstrap releases emit internal deprecation warnings on import.
    warnings.filterwarnings("ignore", category=DeprecationWarning, module=r"ttkbootstrap(\.|$)")
    import ttkbootstrap as ttk

try:
    with warnings.catch_warnings():
        warnings.filterwarnings(
            "ignore", category=DeprecationWarning, module=r"ttkbootstrap(\.|$)"
        )
        from ttkbootstrap.constants import DANGER, PRIMARY, SECONDARY, SUCCESS, WARNING
except Exception:
    # Fallback strings match ttkbootstrap style names.
    DANGER = "danger"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUCCESS = "success"
    WARNING = "warning"

try:
    # Preferred import path in newer ttkbootstrap versions.
    with warnings.catch_warnings():
        warnings.filterwarnings(
            "ignore", category=DeprecationWarning, module=r"ttkbootstrap(\.|$)"
        )
        from ttkbootstrap.widgets import ToolTip
except Exception:
    # Legacy import path kept for older versions.
    with warnings.catch_warnings():
        warnings.filterwarnings(
            "ignore", category=DeprecationWarning, module=r"ttkbootstrap(\.|$)"
        )
        from ttkbootstrap.tooltip import ToolTip


def _set_if_missing(name: str, value) -> None:
    if not hasattr(ttk, name):
        setattr(ttk, name, value)


# Variable classes are re-exported in most versions, but not all.
_set_if_missing("StringVar", tk.StringVar)
_set_if_missing("IntVar", tk.IntVar)
_set_if_missing("BooleanVar", tk.BooleanVar)

# Widgets used by the generator view.
_set_if_missing("Frame", tk_ttk.Frame)
_set_if_missing("Label", tk_ttk.Label)
_set_if_missing("Entry", tk_ttk.Entry)
_set_if_missing("Button", tk_ttk.Button)
_set_if_missing("Checkbutton", tk_ttk.Checkbutton)
_set_if_missing("Scale", tk_ttk.Scale)
_set_if_missing("Progressbar", tk_ttk.Progressbar)

# LabelFrame naming changed between versions.
if hasattr(ttk, "Labelframe"):
    _set_if_missing("LabelFrame", getattr(ttk, "Labelframe"))
elif hasattr(ttk, "LabelFrame"):
    _set_if_missing("Labelframe", getattr(ttk, "LabelFrame"))
else:
    _set_if_missing("Labelframe", tk_ttk.Labelframe)
    _set_if_missing("LabelFrame", tk_ttk.Labelframe)


# Window wrapper.
if not hasattr(ttk, "Window"):

    class _Window(tk.Tk):
        def __init__(self, *args, **kwargs):
            kwargs.pop("themename", None)
            super().__init__(*args, **kwargs)

    setattr(ttk, "Window", _Window)

__all__ = ["DANGER", "PRIMARY", "SECONDARY", "SUCCESS", "WARNING", "ToolTip", "ttk"]
