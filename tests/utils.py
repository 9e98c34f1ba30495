from __future__ import annotations

from typing import Dict, List, Optional

from hypothesis import strategies as st

from iconify_svg import FetchFailedError, Flip, IconRequest, Rotation

HOME_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="1em" height="1em"'
    ' viewBox="0 0 24 24"><path fill="currentColor"'
    ' d="M10 20v-6h4v6h5v-8h3L12 3L2 12h3v8z"/></svg>'
)


class FakeTransport:
    """Transport that serves canned responses and records every fetch."""

    def __init__(
        self, responses: Optional[Dict[str, str]] = None, default: str = HOME_SVG
    ) -> None:
        self.responses = responses if responses is not None else {}
        self.default = default
        self.calls: List[str] = []
        self.fail_with: Optional[str] = None

    def fetch(self, url: str) -> str:
        self.calls.append(url)
        if self.fail_with is not None:
            raise FetchFailedError(url, self.fail_with)
        return self.responses.get(url, self.default)


class ExplodingTransport:
    """Transport for code paths that must never reach the network."""

    def fetch(self, url: str) -> str:
        raise AssertionError(f"Unexpected network access: {url}")


segments = st.from_regex(r"[a-z0-9][a-z0-9_-]{0,11}", fullmatch=True)
option_values = st.none() | st.text(min_size=0, max_size=8)


@st.composite
def icon_requests(draw: st.DrawFn) -> IconRequest:
    """Random valid requests."""
    return IconRequest(
        pack=draw(segments),
        name=draw(segments),
        color=draw(option_values),
        width=draw(option_values),
        height=draw(option_values),
        flip=draw(st.none() | st.sampled_from(Flip)),
        rotate=draw(st.none() | st.sampled_from(Rotation)),
        view_box=draw(st.booleans()),
    )
