"""ViewModel package for UI state and command surfaces.

Call context:
    ``ledger_ui/web_ui/main.py`` creates one router and one theme viewmodel
    per page and binds widget visibility and dark mode to them.

Responsibilities:
    - Own the mutable UI state (visible view, theme) behind public methods.
    - Notify views through callbacks instead of touching widgets directly.
    - Keep MVVM boundaries explicit by avoiding transport logic.
"""
