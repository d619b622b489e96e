"""Hydrologic core formulas for the rooftop rainfall calculator.

Contains pure computational utilities (no I/O) for rooftop runoff.
"""

__all__ = ["effective_rainfall_mm", "calculate_runoff"]


def effective_rainfall_mm(rainfall: float, initial_loss: float) -> float:
    """Rainfall depth (mm) left after the initial loss, clamped at zero."""
    # 0.0 first so a NaN difference also clamps to zero
    return max(0.0, rainfall - initial_loss)


def calculate_runoff(initial_loss: float, coefficient: float, area: float, rainfall: float) -> float:
    """Runoff volume (litres) collected from a roof. Q = max(P - IL, 0) * A * C.

    Rainfall below the initial loss (e.g. the depth needed to fill a first
    flush diverter) produces no runoff rather than a negative volume.
    """
    return effective_rainfall_mm(rainfall, initial_loss) * area * coefficient
