"""Human-readable numbers with decimal or binary unit prefixes."""

from dataclasses import dataclass

_PREFIXES = ("", "k", "M", "G", "T", "P")


@dataclass(frozen=True)
class PowFormat:
    """A quantity formatted with the largest fitting power prefix.

    Format specs: ``""`` (plain), ``">"``/``"<"`` (aligned to a fixed width)
    and ``"="`` (coefficient padded so the suffix lines up). A width after the
    alignment character is accepted and ignored.
    """

    value: int
    unit: str
    binary: bool = False

    def _parse_spec(self, spec: str) -> str:
        rest = spec[1:] if spec.startswith(":") else spec
        align = ""
        if rest and rest[0] in "><=":
            align, rest = rest[0], rest[1:]
        digits = len(rest) - len(rest.lstrip("0123456789"))
        if rest[digits:]:
            raise ValueError(f"invalid format specifier: {spec!r}")
        return align

    def __format__(self, spec: str) -> str:
        align = self._parse_spec(spec)
        base = 1024 if self.binary else 1000
        fraction = float(self.value)
        power = 0
        while power + 1 < len(_PREFIXES) and fraction / base >= 1:
            fraction /= base
            power += 1

        number_width = 5 + int(self.binary)
        max_width = number_width + 1 + int(self.binary) + len(self.unit)
        prefix = _PREFIXES[power] + ("i" if self.binary and power else "")

        if align == ">":
            return format(format(self, ""), f">{max_width}")
        if align == "<":
            return format(format(self, ""), f"<{max_width}")
        if align == "=":
            padding = "" if power else ("  " if self.binary else " ")
            return f"{fraction:<{number_width}.1f}{padding}{prefix}{self.unit}"
        return f"{fraction:.1f}{prefix}{self.unit}"


def format_pow(value: int, unit: str, binary: bool = False, spec: str = "") -> str:
    """Format ``value`` in ``unit`` with a power prefix."""
    return format(PowFormat(value, unit, binary), spec)