"""Command-line entrypoint: `iconify-svg mdi:home --color red`.

Mostly useful for preparing offline icons in CI, or for checking what the API
returns for a set of options."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Tuple

import tyro
from rich.console import Console
from rich.markup import escape

from ._config import IconifyConfig
from ._errors import IconifyError
from ._request import IconRequest
from ._resolver import IconResolver

CONSOLE = Console(stderr=True)


def main(
    references: tyro.conf.Positional[Tuple[str, ...]],
    color: Optional[str] = None,
    width: Optional[str] = None,
    height: Optional[str] = None,
    flip: Optional[Literal["horizontal", "vertical", "both"]] = None,
    rotate: Optional[Literal["90", "180", "270"]] = None,
    view_box: bool = False,
    offline: bool = False,
    prepare: bool = False,
    no_cache: bool = False,
    base_url: Optional[str] = None,
    cache_dir: Optional[Path] = None,
    offline_dir: Optional[Path] = None,
    output: Optional[Path] = None,
    verbose: bool = False,
) -> int:
    """Resolve Iconify icons to SVG markup and print them.

    Args:
        references: Icons to resolve, as `pack:name`.
        color: Any valid CSS color.
        width: Any valid CSS width.
        height: Any valid CSS height.
        flip: Flip the icon horizontally, vertically, or both.
        rotate: Rotate the icon clockwise, in degrees.
        view_box: Include an invisible bounding box.
        offline: Use offline mode. Icons are read from the offline directory
            unless --prepare is also passed.
        prepare: Fetch icons and write them to the offline directory. Implies
            --offline.
        no_cache: Don't read or write the local cache.
        base_url: Overrides ICONIFY_URL.
        cache_dir: Overrides ICONIFY_CACHE_DIR.
        offline_dir: Overrides ICONIFY_OFFLINE_DIR.
        output: Write the SVG to this file instead of stdout. Requires exactly
            one reference.
        verbose: Print cache hits and fetches.
    """
    if output is not None and len(references) != 1:
        CONSOLE.print("[bold red]--output requires exactly one reference.")
        return 1

    environ: Dict[str, str] = {}
    if prepare:
        environ["ICONIFY_PREPARE"] = "true"
    overrides: Dict[str, Any] = {}
    if no_cache:
        overrides["cache_enabled"] = False
    if base_url is not None:
        overrides["base_url"] = base_url
    if cache_dir is not None:
        overrides["cache_dir"] = cache_dir
    if offline_dir is not None:
        overrides["offline_dir"] = offline_dir

    # Start from the process environment; flags take precedence.
    config = IconifyConfig.from_env(
        {**os.environ, **environ},
        offline=(offline or prepare) or None,
        **overrides,
    )
    resolver = IconResolver(config, verbose=verbose)

    failed = False
    for reference in references:
        try:
            request = IconRequest.parse(
                reference,
                color=color,
                width=width,
                height=height,
                flip=flip,
                rotate=rotate,
                view_box=view_box,
            )
            text = resolver.resolve(request)
        except IconifyError as e:
            CONSOLE.print(
                f"[bold red]{escape(reference)}:[/bold red] {escape(str(e))}",
                highlight=False,
                soft_wrap=True,
            )
            failed = True
            continue

        if output is not None:
            try:
                output.write_text(text, encoding="utf-8")
            except OSError as e:
                CONSOLE.print(
                    f"[bold red]{escape(str(output))}:[/bold red] {escape(str(e))}",
                    highlight=False,
                    soft_wrap=True,
                )
                failed = True
                continue
            CONSOLE.print(f"[bold](iconify)[/bold] Wrote {reference} to {output}")
        else:
            sys.stdout.write(text + "\n")

    return 1 if failed else 0


def entrypoint() -> None:
    """Entrypoint for use with pyproject scripts."""
    sys.exit(tyro.cli(main))


if __name__ == "__main__":
    entrypoint()
