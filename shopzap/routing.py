"""URL helpers for store routes.

Everything here is pure: no directory access. Canonical URLs are always
built from `StoreRecord.username`, never from the display name.
"""
from typing import Dict, List, Optional

from urllib.parse import quote, unquote, urlsplit, urlunsplit

from shopzap.models import StoreRecord
from shopzap.utils import create_slug

STORE_SEGMENT = 'store'

# App paths that are never store slugs
RESERVED_PATHS = [
    'auth', 'login', 'signup', 'verify', 'auth-callback',
    'dashboard', 'onboarding', 'store-builder', 'embed-generator',
    'pricing', 'features', 'about', 'privacy', 'terms',
    'order-success', 'track-order', 'order', 'admin'
]

RESERVED_SUBDOMAINS = ['www']

LOCAL_HOSTS = ['localhost', '127.0.0.1']


def is_reserved_path(segment: str) -> bool:
    return segment.lower() in RESERVED_PATHS


def _segments(path: str) -> List[str]:
    return urlsplit(path).path.split('/')


def _identifier_index(segments: List[str]) -> Optional[int]:
    if STORE_SEGMENT not in segments:
        return None

    index = segments.index(STORE_SEGMENT) + 1
    if index < len(segments) and segments[index] != '':
        return index
    return None


def is_store_route(path: str) -> bool:
    segments = [segment for segment in _segments(path) if segment]
    return len(segments) > 0 and segments[0] == STORE_SEGMENT


def extract_store_identifier(path: str) -> Optional[str]:
    """Returns the decoded segment following `/store/` or None."""
    segments = _segments(path)
    index = _identifier_index(segments)
    if index is None:
        return None
    return unquote(segments[index])


def should_redirect(identifier: str, store: StoreRecord) -> bool:
    return identifier.lower() != store.username.lower()


def build_store_url(
    store: StoreRecord,
    subpath: str = '',
    origin: Optional[str] = None
) -> str:
    if subpath and not subpath.startswith(('/', '?', '#')):
        subpath = f"/{subpath}"

    url = f"/{STORE_SEGMENT}/{quote(store.username, safe='')}{subpath}"

    if origin:
        url = f"{origin.rstrip('/')}{url}"
    return url


def rewrite_legacy_path(path: str, store: StoreRecord) -> str:
    """Swaps the store identifier in `path` for the canonical username.

    Only the segment after `store` changes. Paths without a store
    identifier come back untouched.
    """
    parts = urlsplit(path)
    segments = parts.path.split('/')

    index = _identifier_index(segments)
    if index is None:
        return path

    segments[index] = quote(store.username, safe='')
    return urlunsplit(parts._replace(path='/'.join(segments)))


def subdomain_from_host(hostname: str) -> Optional[str]:
    """Returns the store label of a `<label>.shopzap.io` style host."""
    host = hostname.split(':')[0].lower().strip('.')

    if host in LOCAL_HOSTS:
        return None

    labels = host.split('.')
    if len(labels) < 3 or all(label.isdigit() for label in labels):
        return None

    label = labels[0]
    if label == '' or label in RESERVED_SUBDOMAINS:
        return None
    return label


def store_urls(store: StoreRecord, origin: Optional[str] = None) -> Dict[str, str]:
    return {
        'storefront': build_store_url(store, origin=origin),
        'about': build_store_url(store, '/about', origin=origin),
        'cart': build_store_url(store, '/cart', origin=origin),
        'checkout': build_store_url(store, '/checkout', origin=origin),
    }


def product_url(
    store: StoreRecord,
    product_name: str,
    origin: Optional[str] = None
) -> str:
    return build_store_url(
        store,
        f"/product/{create_slug(product_name)}",
        origin=origin
    )
