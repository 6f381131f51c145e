"""ViewModel package for canvas state and command surfaces.

Call context:
    A presentation layer (Tk, NiceGUI, ...) imports concrete viewmodels from
    this package to bind widget callbacks to state transitions.

Dependencies:
    Modules in this package depend on domain types and the drag-and-drop
    coordinator only. Rendering and persistence remain outside.

Responsibilities:
    - Expose canvas state and command intent callbacks.
    - Transform immutable collection snapshots into view-facing rows.
    - Keep MVVM boundaries explicit by avoiding widget logic.
"""
