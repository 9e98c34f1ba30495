"""Basic usage

Fetch a few icons and write them to disk. The first run downloads each icon;
later runs read them from the local cache.
"""

from pathlib import Path

import tyro

import iconify_svg


def main(out_dir: Path = Path("out"), color: str = "red") -> None:
    """Write some icons to `out_dir`.

    Args:
        out_dir: Directory to write SVG files to.
        color: Any valid CSS color.
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    for reference in ("mdi:home", "mdi:account", "tabler:settings"):
        markup = iconify_svg.svg(reference, color=color, width="48px")
        path = out_dir / (reference.replace(":", "-") + ".svg")
        path.write_text(markup, encoding="utf-8")
        print(f"Wrote {path}")


if __name__ == "__main__":
    tyro.cli(main)
