"""POX Autodiscover lookup of the EAS endpoint for an e-mail address.

Candidate hosts derived from the address's domain are asked in turn over
HTTPS; an ``_autodiscover._tcp`` SRV record is the last resort. Server-side
redirects by URL and by address are followed.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional
from xml.sax.saxutils import escape

import dns.exception
import dns.resolver
import requests

RESPONSE_SCHEMA = (
    "http://schemas.microsoft.com/exchange/autodiscover/mobilesync/responseschema/2006"
)
REQUEST_SCHEMA = (
    "http://schemas.microsoft.com/exchange/autodiscover/mobilesync/requestschema/2006"
)
PATH = "/autodiscover/autodiscover.xml"
MAX_REDIRECTS = 10

_XML_ESCAPES = {
    '"': "&#34;",
    "'": "&#39;",
    "\t": "&#x9;",
    "\n": "&#xA;",
    "\r": "&#xD;",
}


class AutodiscoverError(Exception):
    """Raised when an Autodiscover lookup fails."""


@dataclass
class Result:
    """The outcome of an Autodiscover lookup."""

    url: str = ""
    display_name: str = ""
    email_address: str = ""
    redirect_url: str = ""
    redirect_addr: str = ""


@dataclass(frozen=True)
class Credentials:
    """Optional Basic credentials sent with the discovery request itself."""

    username: str
    password: str


CandidatesFunc = Callable[[str], Optional[List[str]]]
SrvResolver = Callable[[str], str]


class Discoverer:
    """Performs POX Autodiscover lookups.

    ``candidates_override`` replaces the default list of candidate URLs for a
    domain. ``srv_resolver`` replaces DNS SRV resolution: it receives the
    record name and returns ``host`` or ``host:port`` (no port means 443),
    raising ``AutodiscoverError``, ``LookupError`` or ``OSError`` on failure.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        candidates_override: Optional[CandidatesFunc] = None,
        srv_resolver: Optional[SrvResolver] = None,
    ) -> None:
        self.session = session if session is not None else requests.Session()
        self._candidates_override = candidates_override
        self._srv_resolver = srv_resolver

    def discover(self, email_address: str, creds: Optional[Credentials] = None) -> Result:
        """Resolve the EAS endpoint URL for ``email_address``."""
        current = email_address
        for _ in range(MAX_REDIRECTS):
            domain = domain_of(current)
            last_err: Optional[AutodiscoverError] = None
            redirected_to: Optional[str] = None

            for url in self.candidates(domain):
                try:
                    res = self._request_one(url, current, creds)
                except AutodiscoverError as exc:
                    last_err = exc
                    continue
                if res.redirect_url:
                    try:
                        return self.follow_redirect_url(res.redirect_url, current, creds)
                    except AutodiscoverError as exc:
                        last_err = exc
                        continue
                if res.redirect_addr:
                    redirected_to = res.redirect_addr
                    break
                if res.url:
                    return res
                last_err = AutodiscoverError("autodiscover: empty response")

            if redirected_to is not None:
                current = redirected_to
                continue

            host = self._try_lookup_srv(domain)
            if host:
                try:
                    res = self._request_one("https://" + host + PATH, current, creds)
                except AutodiscoverError as exc:
                    last_err = exc
                else:
                    if res.url:
                        return res
                    if res.redirect_addr:
                        current = res.redirect_addr
                        continue
                    if res.redirect_url:
                        return self.follow_redirect_url(res.redirect_url, current, creds)

            if last_err is None:
                last_err = AutodiscoverError(
                    f"autodiscover: no candidates succeeded for {domain}"
                )
            raise last_err
        raise AutodiscoverError("autodiscover: too many redirects")

    def follow_redirect_url(
        self, redirect_url: str, email: str, creds: Optional[Credentials] = None
    ) -> Result:
        """Query ``redirect_url`` and require it to name an EAS URL."""
        res = self._request_one(redirect_url, email, creds)
        if not res.url:
            raise AutodiscoverError("autodiscover: redirect target returned no Url")
        return res

    def candidates(self, domain: str) -> List[str]:
        """Return the candidate Autodiscover URLs for ``domain``, in order."""
        if self._candidates_override is not None:
            return list(self._candidates_override(domain) or [])
        return [
            "https://autodiscover." + domain + PATH,
            "https://" + domain + PATH,
        ]

    def lookup_srv(self, domain: str) -> str:
        """Return the host (with a port unless it is 443) of the domain's SRV record."""
        name = "_autodiscover._tcp." + domain
        if self._srv_resolver is not None:
            return self._srv_resolver(name)
        try:
            answer = dns.resolver.resolve(name, "SRV")
        except dns.exception.DNSException as exc:
            raise AutodiscoverError(f"autodiscover: SRV lookup {name}: {exc}") from exc
        records = sorted(answer, key=lambda r: (r.priority, -r.weight))
        if not records:
            raise AutodiscoverError("autodiscover: no SRV records")
        best = records[0]
        host = str(best.target).removesuffix(".")
        if best.port not in (0, 443):
            host = f"{host}:{best.port}"
        return host

    def _try_lookup_srv(self, domain: str) -> str:
        try:
            return self.lookup_srv(domain)
        except (AutodiscoverError, LookupError, OSError):
            return ""

    def _request_one(self, url: str, email: str, creds: Optional[Credentials]) -> Result:
        body = build_request_xml(email).encode("utf-8")
        auth = (creds.username, creds.password) if creds and creds.username else None
        try:
            resp = self.session.post(
                url,
                data=body,
                headers={"Content-Type": "text/xml; charset=utf-8"},
                auth=auth,
            )
        except requests.RequestException as exc:
            raise AutodiscoverError(f"autodiscover: {url}: {exc}") from exc
        content = resp.content
        if resp.status_code // 100 != 2:
            raise AutodiscoverError(
                f"autodiscover: {url} -> {resp.status_code} {resp.reason or ''}".rstrip()
            )
        return parse_response(content)


def build_request_xml(email_address: str) -> str:
    """Return a mobilesync Autodiscover POX request for ``email_address``."""
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        f'<Autodiscover xmlns="{REQUEST_SCHEMA}">\n'
        "  <Request>\n"
        f"    <EMailAddress>{escape(email_address, _XML_ESCAPES)}</EMailAddress>\n"
        f"    <AcceptableResponseSchema>{RESPONSE_SCHEMA}</AcceptableResponseSchema>\n"
        "  </Request>\n"
        "</Autodiscover>\n"
    )


def _local(tag: str) -> str:
    return tag.rpartition("}")[2]


def _children(el: Optional[ET.Element], name: str) -> Iterator[ET.Element]:
    if el is None:
        return iter(())
    return (child for child in el if _local(child.tag) == name)


def _child(el: Optional[ET.Element], name: str) -> Optional[ET.Element]:
    return next(_children(el, name), None)


def _text(el: Optional[ET.Element], name: str) -> str:
    found = _child(el, name)
    return "".join(found.itertext()) if found is not None else ""


def parse_response(body: bytes) -> Result:
    """Parse a POX Autodiscover response, matching elements by local name."""
    try:
        root = ET.fromstring(body)
    except ET.ParseError as exc:
        raise AutodiscoverError(f"autodiscover: parse response: {exc}") from exc
    if _local(root.tag) != "Autodiscover":
        raise AutodiscoverError(
            "autodiscover: parse response: expected element type <Autodiscover> "
            f"but have <{_local(root.tag)}>"
        )

    response = _child(root, "Response")
    error = _child(response, "Error")
    if error is not None:
        status = _text(error, "Status")
        if status not in ("", "0"):
            raise AutodiscoverError(
                f"autodiscover: server error status={status} "
                f"message={_text(error, 'Message')}"
            )

    user = _child(response, "User")
    action = _child(response, "Action")
    result = Result(
        display_name=_text(user, "DisplayName"),
        email_address=_text(user, "EMailAddress"),
        redirect_url=_text(action, "Redirect"),
        redirect_addr=_text(action, "RedirectAddr"),
    )
    for server in _children(_child(action, "Settings"), "Server"):
        url = _text(server, "Url")
        if _text(server, "Type").casefold() == "mobilesync" and url:
            result.url = url
            break
    return result


def domain_of(email_address: str) -> str:
    """Return the part of ``email_address`` after its last ``@``."""
    at = email_address.rfind("@")
    if at < 0 or at == len(email_address) - 1:
        raise AutodiscoverError(f"autodiscover: invalid e-mail address {email_address!r}")
    return email_address[at + 1 :]