"""GUI package - ipywidgets view of progress reports for Jupyter notebooks.

Entry point:
    from event_progress.gui.log_view import ProgressLogView
    view = ProgressLogView(title="OTC")
    display(view.panel)

Importing this package requires ipywidgets; the tracker itself does not.
"""
