#!/usr/bin/env python3
# unit_converter_gui.py
# Tkinter form for unit_converter

import tkinter as tk
from tkinter import ttk
from typing import Optional

from unit_converter import (
    ConversionError,
    ConversionSession,
    format_result,
    list_categories,
)

APP_TITLE = "Unit Converter"
APP_WIDTH, APP_HEIGHT = 520, 300


class App(tk.Tk):
    def __init__(self, session: Optional[ConversionSession] = None, precision: int = 15):
        super().__init__()
        self.session = session or ConversionSession()
        self.precision = precision
        self.title(APP_TITLE)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")
        self.minsize(420, 260)

        title = ttk.Label(self, text=APP_TITLE, font=("Segoe UI", 14, "bold"))
        title.pack(pady=(10, 4))

        self._build_category()
        self._build_input()
        self._build_output()
        self._sync_from_session()

        self.bind_all("<Control-l>", lambda e: self.val_var.set(""))

    # -------------------- Category --------------------
    def _build_category(self):
        frm = ttk.LabelFrame(self, text="Conversion Type")
        frm.pack(fill="x", padx=10, pady=6)
        self.cat_var = tk.StringVar()
        self.cat_cb = ttk.Combobox(frm, textvariable=self.cat_var, state="readonly",
                                   values=[c.value for c in list_categories()])
        self.cat_cb.pack(fill="x", padx=6, pady=6)
        self.cat_cb.bind("<<ComboboxSelected>>", self._on_category)

    # -------------------- Input --------------------
    def _build_input(self):
        frm = ttk.LabelFrame(self, text="Input")
        frm.pack(fill="x", padx=10, pady=6)
        self.val_var = tk.StringVar()
        self.val_entry = ttk.Entry(frm, textvariable=self.val_var, width=16)
        self.val_entry.grid(row=0, column=0, sticky="we", padx=6, pady=6)
        self.from_cb = ttk.Combobox(frm, state="readonly", width=14)
        self.from_cb.grid(row=0, column=1, sticky="w", padx=6, pady=6)
        ttk.Button(frm, text="Swap ⟷", command=self._on_swap).grid(row=0, column=2, padx=6)
        frm.columnconfigure(0, weight=1)

        self.val_var.trace_add("write", lambda *_: self._on_value())
        self.from_cb.bind("<<ComboboxSelected>>", self._on_from)

    # -------------------- Output --------------------
    def _build_output(self):
        frm = ttk.LabelFrame(self, text="Output")
        frm.pack(fill="both", expand=True, padx=10, pady=6)
        self.to_cb = ttk.Combobox(frm, state="readonly", width=14)
        self.to_cb.pack(anchor="w", padx=6, pady=6)
        self.to_cb.bind("<<ComboboxSelected>>", self._on_to)
        self.res_var = tk.StringVar()
        ttk.Label(frm, textvariable=self.res_var, font=("Segoe UI", 20, "bold"),
                  wraplength=APP_WIDTH - 40).pack(anchor="w", padx=6)

    # -------------------- Handlers --------------------
    def _sync_from_session(self):
        s = self.session
        self.cat_var.set(s.category.value)
        self.from_cb["values"] = s.units
        self.to_cb["values"] = s.units
        self.from_cb.set(s.input_unit)
        self.to_cb.set(s.output_unit)
        if self.val_var.get() != s.raw_value:
            self.val_var.set(s.raw_value)
        self._refresh()

    def _refresh(self):
        try:
            self.res_var.set(format_result(self.session.result(), self.precision))
        except ConversionError as e:
            self.res_var.set(str(e))

    def _on_category(self, _evt=None):
        self.session.set_category(self.cat_var.get())
        self._sync_from_session()
        self.val_entry.focus_set()

    def _on_value(self):
        self.session.set_value(self.val_var.get())
        self._refresh()

    def _on_from(self, _evt=None):
        self.session.set_input_unit(self.from_cb.get())
        self._refresh()

    def _on_to(self, _evt=None):
        self.session.set_output_unit(self.to_cb.get())
        self._refresh()

    def _on_swap(self):
        self.session.swap_units()
        self._sync_from_session()


def launch_gui(session: Optional[ConversionSession] = None, precision: int = 15):
    app = App(session, precision)
    app.val_entry.focus_set()
    app.mainloop()


def main():
    launch_gui()

if __name__ == "__main__":
    main()
