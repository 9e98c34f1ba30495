"""Offline icons

Prepare icons once with network access, then resolve them again without it.
This is what `ICONIFY_OFFLINE=true ICONIFY_PREPARE=true` does for builds that
use :func:`iconify_svg.svg`.
"""

from pathlib import Path

import tyro

from iconify_svg import IconifyConfig, IconRequest, IconResolver, ResolverMode

ICONS = [
    IconRequest.parse("mdi:home"),
    IconRequest.parse("mdi:home", flip="horizontal", rotate="90"),
    IconRequest.parse("mdi:account", color="#3366ff", view_box=True),
]


def main(offline_dir: Path = Path("icons")) -> None:
    """Prepare `offline_dir`, then serve from it.

    Args:
        offline_dir: Where prepared icons are written.
    """
    prepare = IconResolver(
        IconifyConfig(mode=ResolverMode.OFFLINE_PREPARE, offline_dir=offline_dir),
        verbose=True,
    )
    for request in ICONS:
        prepare.resolve(request)

    # Never touches the network.
    serve = IconResolver(
        IconifyConfig(mode=ResolverMode.OFFLINE_SERVE, offline_dir=offline_dir),
        verbose=True,
    )
    for request in ICONS:
        markup = serve.resolve(request)
        print(f"{request.reference}: {len(markup)} characters")


if __name__ == "__main__":
    tyro.cli(main)
