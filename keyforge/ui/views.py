"""UI construction helpers - separated from app logic for maintainability."""

from __future__ import annotations

import tkinter as tk

from keyforge.config import Config
from keyforge.core.session import GenerationResult
from keyforge.ui.ttk_compat import DANGER, PRIMARY, SECONDARY, ToolTip, ttk

CLASS_LABELS = (
    ("uppercase", "Uppercase (A-Z)"),
    ("lowercase", "Lowercase (a-z)"),
    ("numbers", "Numbers (0-9)"),
    ("symbols", "Symbols (!@#...)"),
)

EMPTY_HINT = "Select at least one character set"


def strength_caption(result: GenerationResult) -> str:
    """Text shown under the strength bar."""
    if result.is_empty:
        return EMPTY_HINT
    text = f"{result.score}% ({result.tier.value})"
    if not result.is_cryptographic:
        text += " - weak randomness"
    return text


def build_main_view(app) -> None:
    """Build the password-generator UI inside *app*."""
    container = ttk.Frame(app)
    container.pack(fill="both", expand=True, padx=12, pady=12)
    container.columnconfigure(0, weight=1)

    # ----- parameters frame -----
    frm = ttk.LabelFrame(container, text="Options")
    frm.grid(row=0, column=0, sticky="ew")
    frm.columnconfigure(1, weight=1)

    ttk.Label(frm, text="Length:").grid(row=0, column=0, sticky="e", padx=6, pady=4)
    app.var_length = ttk.IntVar(value=app.settings.length)
    app.lbl_length = ttk.Label(frm, text=str(app.settings.length), width=3)

    def _on_slide(value):
        length = Config.clamp_length(value)
        app.var_length.set(length)
        app.lbl_length.config(text=str(length))

    app.scale = ttk.Scale(
        frm,
        from_=Config.MIN_LENGTH,
        to=Config.MAX_LENGTH,
        variable=app.var_length,
        command=_on_slide,
        bootstyle=PRIMARY,
    )
    app.scale.grid(row=0, column=1, sticky="ew", padx=(2, 4), pady=4)
    app.lbl_length.grid(row=0, column=2, sticky="w", padx=(0, 8))
    ToolTip(app.scale, text=f"Password length ({Config.MIN_LENGTH}-{Config.MAX_LENGTH})")

    app.class_vars = {}
    for i, (name, label) in enumerate(CLASS_LABELS):
        var = ttk.BooleanVar(value=name in app.settings.classes)
        app.class_vars[name] = var
        ttk.Checkbutton(frm, text=label, variable=var).grid(
            row=1 + i // 2, column=i % 2, sticky="w", padx=8, pady=2
        )

    # ----- output frame -----
    out = ttk.Frame(container)
    out.grid(row=1, column=0, pady=12, sticky="ew")
    out.columnconfigure(0, weight=1)

    app.var_pwd = ttk.StringVar()
    app.ent_pwd = ttk.Entry(
        out,
        textvariable=app.var_pwd,
        font=("Consolas", 14),
        state="readonly",
        width=38,
    )
    app.ent_pwd.grid(row=0, column=0, sticky="ew", ipadx=6, ipady=4)

    app.bar = ttk.Progressbar(out, maximum=100, length=400, bootstyle=DANGER)
    app.bar.grid(row=1, column=0, pady=6, sticky="ew")
    app.lbl = ttk.Label(out, text="Strength")
    app.lbl.grid(row=2, column=0)

    # ----- buttons -----
    btn = ttk.Frame(container)
    btn.grid(row=2, column=0, pady=6)
    app.btn_generate = ttk.Button(
        btn, text="Generate", bootstyle=PRIMARY, command=app._on_generate
    )
    app.btn_generate.pack(side="left", padx=6)
    ttk.Button(btn, text="Copy", command=app._on_copy).pack(side="left", padx=6)
    ttk.Button(btn, text="Clear", bootstyle=SECONDARY, command=app._on_clear).pack(
        side="left", padx=6
    )
    ttk.Button(btn, text="Quit", bootstyle=DANGER, command=app.destroy).pack(
        side="left", padx=6
    )

    # ----- history -----
    hist = ttk.LabelFrame(container, text="Recent")
    hist.grid(row=3, column=0, sticky="ew", pady=(6, 0))
    hist.columnconfigure(0, weight=1)
    app.lst_history = tk.Listbox(
        hist, height=Config.HISTORY_SIZE, font=("Consolas", 10), activestyle="none"
    )
    app.lst_history.grid(row=0, column=0, sticky="ew", padx=6, pady=6)
    app.lst_history.bind("<Double-1>", lambda _: app._on_copy_history())
    ToolTip(app.lst_history, text="Double-click to copy")

    # -- shortcuts
    app.bind_all("<Control-g>", lambda *_: app._on_generate())
    app.bind_all("<Control-c>", lambda *_: app._on_copy())
    app.bind_all("<Control-l>", lambda *_: app._on_clear())
    app.bind_all("<Escape>", lambda *_: app.destroy())


# ---------------------------------------------------------------------------
#  Observers: repaint widgets from a GenerationResult
# ---------------------------------------------------------------------------
def show_password(app, result: GenerationResult) -> None:
    app.var_pwd.set(result.password)


def show_strength(app, result: GenerationResult) -> None:
    app.bar["value"] = result.score
    app.bar.configure(bootstyle=result.tier.bootstyle)
    app.lbl.config(text=strength_caption(result))


def show_history(app, result: GenerationResult) -> None:
    app.lst_history.delete(0, tk.END)
    for pwd in result.history:
        app.lst_history.insert(tk.END, pwd)
