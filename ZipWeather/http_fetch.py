"""HTTP GET helper that walks a fixed chain of connectivity variants."""
import logging
import warnings
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple

import requests
from requests.adapters import HTTPAdapter
from urllib3.exceptions import InsecureRequestWarning

# Statuses worth another attempt on the same variant
TRANSIENT_STATUSES = frozenset({408, 429, 500, 502, 503, 504})

# fetch(url, params=None) -> body text, "" on failure
Fetcher = Callable[..., str]


@dataclass(frozen=True)
class ConnectivityVariant:
    """One way of reaching a host: local bind address plus TLS verification."""
    name: str
    # ("0.0.0.0", 0) pins IPv4, ("::", 0) pins IPv6, None = system default
    source_address: Optional[Tuple[str, int]] = None
    verify: bool = True


DEFAULT_VARIANTS = (
    ConnectivityVariant("ipv4", ("0.0.0.0", 0)),
    ConnectivityVariant("ipv6", ("::", 0)),
    ConnectivityVariant("insecure", None, verify=False),
)


class SourceAddressAdapter(HTTPAdapter):
    """HTTPAdapter whose connection pools bind sockets to a fixed local address."""

    def __init__(self, source_address: Optional[Tuple[str, int]] = None, **kwargs):
        # HTTPAdapter.__init__ builds the pool manager, so this must be set first
        self.source_address = source_address
        super().__init__(**kwargs)

    def init_poolmanager(self, connections, maxsize, block=False, **pool_kwargs):
        if self.source_address is not None:
            pool_kwargs["source_address"] = self.source_address
        super().init_poolmanager(connections, maxsize, block=block, **pool_kwargs)


def make_session(variant: ConnectivityVariant) -> requests.Session:
    """A fresh session for one variant; pooled connections are never shared between variants."""
    session = requests.Session()
    adapter = SourceAddressAdapter(variant.source_address)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.verify = variant.verify
    return session


def fetch_text(
    url: str,
    params: Optional[Mapping[str, Any]] = None,
    *,
    timeout: float = 10.0,
    retries: int = 2,
    diagnostic: bool = False,
    session_factory: Callable[[ConnectivityVariant], requests.Session] = make_session,
    variants: Sequence[ConnectivityVariant] = DEFAULT_VARIANTS,
) -> str:
    """
    GET a URL, falling through the connectivity variants until one answers.

    Each variant gets its own session and 1 + retries attempts with the same
    fixed timeout; there is no backoff between attempts.

    Args:
        url: Endpoint URL
        params: Query parameters
        timeout: Per-attempt timeout in seconds
        retries: Extra attempts per variant on network errors and transient statuses
        diagnostic: Return error response bodies instead of treating them as failures
        session_factory: Builds the session used for one variant
        variants: Fallback chain, tried in order

    Returns:
        Response body, or "" if every variant failed
    """
    for variant in variants:
        session = session_factory(variant)
        try:
            body = _fetch_with(session, variant, url, params, timeout, retries, diagnostic)
        finally:
            session.close()
        if body is not None:
            return body

    logging.debug(f"All connectivity variants failed for {url}")
    return ""


def _fetch_with(session, variant, url, params, timeout, retries, diagnostic) -> Optional[str]:
    for attempt in range(retries + 1):
        logging.debug(f"GET {url} via {variant.name} (attempt {attempt + 1}/{retries + 1})")
        try:
            with warnings.catch_warnings():
                if not variant.verify:
                    warnings.simplefilter("ignore", InsecureRequestWarning)
                response = session.get(url, params=params, timeout=timeout, verify=variant.verify)
        except requests.exceptions.RequestException as e:
            logging.debug(f"Network error via {variant.name}: {e}")
            continue

        if response.ok or diagnostic:
            if not response.ok:
                logging.debug(f"HTTP {response.status_code} via {variant.name}, returning error body")
            return response.text

        logging.debug(f"HTTP {response.status_code} via {variant.name}")
        if response.status_code not in TRANSIENT_STATUSES:
            return None
    return None
