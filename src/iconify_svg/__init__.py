""":mod:`iconify_svg` fetches SVG icons from `Iconify <https://iconify.design/>`_
and caches them on disk, so each icon is only downloaded once.

For a list of icons, see `Iconify Icon Sets <https://icon-sets.iconify.design/>`_.

Offline mode lets builds run without network access: set `ICONIFY_OFFLINE=true`
and `ICONIFY_PREPARE=true` once to write every resolved icon to `./icons`, then
drop `ICONIFY_PREPARE` to serve icons from there. Set `ICONIFY_OFFLINE_DIR` to
use a different directory.
"""

from ._config import IconifyConfig as IconifyConfig
from ._config import ResolverMode as ResolverMode
from ._digest import digest_url as digest_url
from ._digest import request_digest as request_digest
from ._errors import FetchFailedError as FetchFailedError
from ._errors import IconifyError as IconifyError
from ._errors import IconNotFoundError as IconNotFoundError
from ._errors import InvalidOptionError as InvalidOptionError
from ._errors import MalformedReferenceError as MalformedReferenceError
from ._errors import OfflineAssetMissingError as OfflineAssetMissingError
from ._errors import StoreIOError as StoreIOError
from ._errors import UnknownOptionError as UnknownOptionError
from ._errors import UrlConstructionError as UrlConstructionError
from ._request import Flip as Flip
from ._request import IconRequest as IconRequest
from ._request import Rotation as Rotation
from ._resolver import IconResolver as IconResolver
from ._store import DirectoryStore as DirectoryStore
from ._store import IconStore as IconStore
from ._store import MemoryStore as MemoryStore
from ._svg import svg as svg
from ._transport import RequestsTransport as RequestsTransport
from ._transport import Transport as Transport
from ._url import DEFAULT_BASE_URL as DEFAULT_BASE_URL
from ._url import build_icon_url as build_icon_url

__version__ = "0.1.0"
