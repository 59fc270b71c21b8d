"""
Font Metrics Providers

Measure rendered text width in points for a font role and size. Every provider
satisfies measure("") == 0 and is monotone: measure(a + b) >= measure(a).
"""

from typing import Dict, Set, Tuple

from reportlab.pdfbase import pdfmetrics
from typing_extensions import Protocol, runtime_checkable

from resumeflow.contexts.layout.logger import log_measure_fallback
from resumeflow.contexts.templating.style_data_structures import FontRole, font_face

DEFAULT_CHAR_WIDTH_RATIO = 0.6


@runtime_checkable
class FontMetrics(Protocol):
    """Width measurement contract used by the line wrapper and block renderer."""

    def measure(self, text: str, role: FontRole, size: float) -> float:
        ...


class MonospaceMetrics:
    """
    Fixed-width metrics: every character is char_width_ratio * size wide.

    Deterministic and dependency-free, so tests inject it for exact widths.
    """

    def __init__(self, char_width_ratio: float = DEFAULT_CHAR_WIDTH_RATIO):
        if char_width_ratio <= 0:
            raise ValueError(f"char_width_ratio must be positive, got {char_width_ratio}")
        self.char_width_ratio = char_width_ratio

    def char_width(self, size: float) -> float:
        return self.char_width_ratio * size

    def measure(self, text: str, role: FontRole, size: float) -> float:
        return len(text) * self.char_width(size)


class ReportLabMetrics:
    """
    Real widths from reportlab's standard font metrics.

    A failed measurement (unknown face, unsupported character) does not abort
    the document: the string is re-measured character by character and each
    character that still fails counts as a monospace estimate. One warning is
    logged per face.
    """

    def __init__(self, font_family: str = "Helvetica", fallback_ratio: float = DEFAULT_CHAR_WIDTH_RATIO):
        self.font_family = font_family
        self.fallback_ratio = fallback_ratio
        self._warned_faces: Set[str] = set()

    def face_for(self, role: FontRole) -> str:
        return font_face(self.font_family, role)

    def measure(self, text: str, role: FontRole, size: float) -> float:
        if not text:
            return 0.0

        face = self.face_for(role)
        try:
            return pdfmetrics.stringWidth(text, face, size)
        except Exception as e:
            if face not in self._warned_faces:
                self._warned_faces.add(face)
                log_measure_fallback(face, e)
            return sum(self._measure_char(char, face, size) for char in text)

    def _measure_char(self, char: str, face: str, size: float) -> float:
        try:
            return pdfmetrics.stringWidth(char, face, size)
        except Exception:
            return self.fallback_ratio * size


class MeasurementCache:
    """
    Memoizing wrapper around any FontMetrics provider.

    Measurement is pure, so results are cached per (text, role, size). A cache
    belongs to one export call; it is not shared across threads.
    """

    def __init__(self, metrics: FontMetrics):
        self.metrics = metrics
        self._cache: Dict[Tuple[str, FontRole, float], float] = {}

    def measure(self, text: str, role: FontRole, size: float) -> float:
        key = (text, role, size)
        if key not in self._cache:
            self._cache[key] = self.metrics.measure(text, role, size)
        return self._cache[key]

    def is_cached(self, text: str, role: FontRole, size: float) -> bool:
        return (text, role, size) in self._cache

    def clear_cache(self):
        """Clear all memoized widths."""
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)
