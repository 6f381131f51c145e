"""Form canvas engine: ordered field collection plus drag-and-drop coordination.

Layers follow MVVM + Hexagonal boundaries:
    - ``domain``: value objects, the field collection store, identity sources.
    - ``usecases``: gesture orchestration on top of the store.
    - ``viewmodels``: view-facing projections and command surfaces.
"""
