from __future__ import annotations

from event_progress.models.state import TrendStatus


def classify_trend(
    displayed_eta: int,
    elapsed_since_last: float,
    previous_displayed_eta: int,
    has_previous: bool,
    *,
    improving_ratio: float = 0.75,
    worsening_ratio: float = 1.33,
) -> TrendStatus:
    """Compare the new ETA with the one printed before.

    The time spent since the previous report is added back before comparing,
    so a loop running exactly as predicted stays NEUTRAL.

    An ETA creeping up by less than the thresholds at every report is never
    flagged. Throughput usually changes abruptly (other jobs grabbing or
    releasing resources, buffers filling up), so this is accepted.
    """
    if not has_previous or displayed_eta < 2:
        return TrendStatus.NEUTRAL
    projected = displayed_eta + elapsed_since_last
    if projected < improving_ratio * previous_displayed_eta:
        return TrendStatus.IMPROVING
    if projected > worsening_ratio * previous_displayed_eta:
        return TrendStatus.WORSENING
    return TrendStatus.NEUTRAL
