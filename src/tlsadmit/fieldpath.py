"""Field path builder used to attribute validation errors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldPath:
    """Immutable path such as ``spec.servingCerts[1].names[0]``."""

    segments: tuple[str | int, ...] = ()

    @classmethod
    def new(cls, *names: str) -> FieldPath:
        """Start a path from one or more field names."""
        return cls(tuple(names))

    def child(self, *names: str) -> FieldPath:
        return FieldPath((*self.segments, *names))

    def index(self, position: int) -> FieldPath:
        return FieldPath((*self.segments, position))

    def __str__(self) -> str:
        rendered = ""
        for segment in self.segments:
            if isinstance(segment, int):
                rendered += f"[{segment}]"
            elif rendered:
                rendered += f".{segment}"
            else:
                rendered = segment
        return rendered
