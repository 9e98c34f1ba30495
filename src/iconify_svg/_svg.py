from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional

from ._config import IconifyConfig
from ._request import IconRequest
from ._resolver import IconResolver


@lru_cache(maxsize=None)
def default_resolver() -> IconResolver:
    """Resolver configured from the environment. Created on first use; the
    environment is not read again afterwards."""
    return IconResolver(IconifyConfig.from_env())


def svg(
    reference: str,
    resolver: Optional[IconResolver] = None,
    **options: Any,
) -> str:
    """Fetch an SVG from Iconify and return it as a string. Results are cached,
    so the same icon is only downloaded once.

    For a list of icons, see https://icon-sets.iconify.design/.

    .. code-block:: python

        import iconify_svg

        markup = iconify_svg.svg("mdi:home", color="red", rotate="90")

    Args:
        reference: Icon pack and icon name, separated by a colon.
        resolver: Resolver to use. Defaults to one configured from
            `ICONIFY_*` environment variables.
        **options: Presentation options, passed to `IconRequest.parse`:

            - `color`: Any valid CSS color.
            - `width`: Any valid CSS width. Defaults to `1em` server-side.
            - `height`: Any valid CSS height. Defaults to `1em` server-side.
            - `flip`: "horizontal", "vertical", or "both".
            - `rotate`: "90", "180", or "270".
            - `view_box`: If True, the SVG will include an invisible bounding box.

    Raises:
        UnknownOptionError: An option name is not one of the above.
    """
    request = IconRequest.parse(reference, **options)
    if resolver is None:
        resolver = default_resolver()
    return resolver.resolve(request)
