"""Request model: one icon reference plus its presentation options."""

from __future__ import annotations

import dataclasses
import enum
from typing import Any

from ._errors import InvalidOptionError, MalformedReferenceError, UnknownOptionError


class Flip(enum.Enum):
    """Mirror the icon horizontally, vertically, or both."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    BOTH = "horizontal,vertical"

    @classmethod
    def parse(cls, value: Flip | str) -> Flip:
        if isinstance(value, Flip):
            return value
        flip = _FLIP_ALIASES.get(value) if isinstance(value, str) else None
        if flip is None:
            raise InvalidOptionError(
                "flip",
                value,
                hint='Flip can be one of "horizontal", "vertical", or "both".',
            )
        return flip


_FLIP_ALIASES = {
    "horizontal": Flip.HORIZONTAL,
    "vertical": Flip.VERTICAL,
    "both": Flip.BOTH,
    "horizontal,vertical": Flip.BOTH,
    "vertical,horizontal": Flip.BOTH,
}


class Rotation(enum.Enum):
    """Clockwise rotation, in degrees. Values are the API's query strings."""

    ROTATE_90 = "90deg"
    ROTATE_180 = "180deg"
    ROTATE_270 = "270deg"

    @classmethod
    def parse(cls, value: Rotation | str | int) -> Rotation:
        if isinstance(value, Rotation):
            return value
        key = value
        # `bool` is an `int` subclass; `rotate=True` is not a rotation.
        if isinstance(value, int) and not isinstance(value, bool):
            key = str(value)
        rotation = _ROTATION_ALIASES.get(key) if isinstance(key, str) else None
        if rotation is None:
            raise InvalidOptionError(
                "rotate",
                value,
                hint='Rotate can be one of "90", "180", or "270".',
            )
        return rotation


_ROTATION_ALIASES = {
    "90": Rotation.ROTATE_90,
    "180": Rotation.ROTATE_180,
    "270": Rotation.ROTATE_270,
}

OPTION_NAMES = ("color", "width", "height", "flip", "rotate", "view_box")


def split_reference(reference: str) -> tuple[str, str]:
    """Split a `pack:name` reference into its two parts."""
    if not isinstance(reference, str):
        raise MalformedReferenceError(repr(reference))
    parts = reference.split(":")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise MalformedReferenceError(reference)
    return parts[0], parts[1]


@dataclasses.dataclass(frozen=True)
class IconRequest:
    """A single icon resolution request.

    `pack` and `name` identify the icon; every other field is an optional
    override that the Iconify API applies server-side. Leaving a field unset
    lets the API use its default (for example, `1em` for width and height).
    """

    pack: str
    name: str
    color: str | None = None
    """Any valid CSS color. Replaces `currentColor` in monotone icons."""
    width: str | None = None
    """Any valid CSS width. If only one dimension is set, the other scales."""
    height: str | None = None
    flip: Flip | None = None
    rotate: Rotation | None = None
    view_box: bool = False
    """Add an invisible rectangle covering the full view box."""

    def __post_init__(self) -> None:
        for part in (self.pack, self.name):
            if not isinstance(part, str) or part == "" or ":" in part:
                raise MalformedReferenceError(f"{self.pack}:{self.name}")
        for field in ("color", "width", "height"):
            value = getattr(self, field)
            if value is not None and not isinstance(value, str):
                raise InvalidOptionError(
                    field,
                    value,
                    hint=f'Expected {field} to be a string: `{field}="..."`.',
                )
        if not isinstance(self.view_box, bool):
            raise InvalidOptionError(
                "view_box",
                self.view_box,
                hint="Expected view_box to be a bool value, `True` or `False`.",
            )

        # Normalize string-typed flip/rotate values so that equal requests
        # compare (and hash) equal.
        if self.flip is not None and not isinstance(self.flip, Flip):
            object.__setattr__(self, "flip", Flip.parse(self.flip))
        if self.rotate is not None and not isinstance(self.rotate, Rotation):
            object.__setattr__(self, "rotate", Rotation.parse(self.rotate))

    @property
    def reference(self) -> str:
        return f"{self.pack}:{self.name}"

    @classmethod
    def parse(cls, reference: str, **options: Any) -> IconRequest:
        """Build a request from a `pack:name` reference and keyword options.

        Args:
            reference: Icon pack and icon name, separated by a colon.
            **options: Any of `color`, `width`, `height`, `flip`, `rotate`,
                `view_box`. `None` is treated the same as leaving the option out.

        Raises:
            MalformedReferenceError: `reference` is not `pack_name:icon_name`.
            UnknownOptionError: An option name is not recognized.
            InvalidOptionError: An option value is not accepted.
        """
        pack, name = split_reference(reference)

        for option in options:
            if option not in OPTION_NAMES:
                raise UnknownOptionError(option)

        flip = options.get("flip")
        rotate = options.get("rotate")
        view_box = options.get("view_box")
        return cls(
            pack=pack,
            name=name,
            color=options.get("color"),
            width=options.get("width"),
            height=options.get("height"),
            flip=None if flip is None else Flip.parse(flip),
            rotate=None if rotate is None else Rotation.parse(rotate),
            view_box=False if view_box is None else view_box,
        )
