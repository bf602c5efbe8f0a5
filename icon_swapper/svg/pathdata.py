"""Path data scaling and formatting.

Path data is parsed with svg.path into absolute segments, every coordinate,
control point and arc radius is multiplied by a uniform factor, and the result
is written back with a fixed number of decimals::

    >>> scale_path_data("M0 0 L12 12", 100 / 24)
    'M0 0 L50 50'
"""

from __future__ import annotations

from svg.path import Arc, Close, CubicBezier, Line, Move, QuadraticBezier, parse_path

from icon_swapper.exceptions import NormalizationError

DEFAULT_PRECISION = 3


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Round ``value`` and print it without trailing zeros."""
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def scale_path_data(d: str, factor: float = 1.0, precision: int = DEFAULT_PRECISION) -> str:
    """Scale path data ``d`` by ``factor``.

    Relative commands come out absolute and ``H``/``V``/``S``/``T`` shorthands
    are expanded, so the output only uses ``M L C Q A Z``.

    Raises:
        ValueError: If svg.path cannot parse ``d``.
        NormalizationError: On a segment type this module does not know.
    """

    def num(value: float) -> str:
        return format_number(value * factor, precision)

    def point(p: complex) -> str:
        return f"{num(p.real)} {num(p.imag)}"

    commands: list[str] = []
    for segment in parse_path(d):
        if isinstance(segment, Move):
            commands.append(f"M{point(segment.end)}")
        elif isinstance(segment, Close):
            commands.append("Z")
        elif isinstance(segment, Line):
            commands.append(f"L{point(segment.end)}")
        elif isinstance(segment, CubicBezier):
            commands.append(
                f"C{point(segment.control1)} {point(segment.control2)} {point(segment.end)}"
            )
        elif isinstance(segment, QuadraticBezier):
            commands.append(f"Q{point(segment.control)} {point(segment.end)}")
        elif isinstance(segment, Arc):
            # rotation is an angle and the flags are booleans: neither scales
            commands.append(
                f"A{num(abs(segment.radius.real))} {num(abs(segment.radius.imag))} "
                f"{format_number(segment.rotation, precision)} "
                f"{int(bool(segment.arc))} {int(bool(segment.sweep))} {point(segment.end)}"
            )
        else:
            raise NormalizationError(
                "Unsupported path segment", details={"segment": type(segment).__name__}
            )

    return " ".join(commands)
