from .hydrology import calculate_runoff, effective_rainfall_mm

__all__ = ["calculate_runoff", "effective_rainfall_mm"]
