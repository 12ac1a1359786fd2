from .normalize import normalize_labels, normalize_points

__all__ = ["normalize_labels", "normalize_points"]
