# Percent-encoding, parameter normalization and signature base string
# construction for OAuth 1.0a (RFC 5849, section 3.4.1).

import re

from urllib.parse import quote, unquote_to_bytes

from pyutil.assertutil import precondition

from txoauth1.errors import MalformedQueryError, InvalidParameterError

OAUTH_VERSION = '1.0'
PROTOCOL_PREFIX = 'oauth_'
DEFAULT_PORTS = {'http': 80, 'https': 443}

BAD_ESCAPE_R = re.compile(r'%(?![0-9A-Fa-f]{2})')
PORT_R = re.compile(r'[0-9]+')

def to_unicode(s):
    """ Return s as text, decoding bytes as UTF-8. Raise TypeError if s
    is bytes that are not valid UTF-8. """
    if isinstance(s, str):
        return s
    precondition(isinstance(s, bytes), "s is required to be str or bytes", s=s)
    try:
        return s.decode('utf-8')
    except UnicodeDecodeError as le:
        raise TypeError("You are required to pass either text or UTF-8 encoded bytes: %r (%s)" % (s, le))

def escape(s):
    """Escape a URL including any /."""
    if isinstance(s, str):
        s = s.encode('utf-8')
    # quote() already treats A-Za-z0-9 and "-._~" as unreserved, and
    # emits uppercase hex digits.
    return quote(s, safe='~')

def _unescape(query, s):
    if BAD_ESCAPE_R.search(s):
        raise MalformedQueryError(query, "invalid percent-escape in %r" % (s,))
    try:
        return unquote_to_bytes(s.replace('+', ' ')).decode('utf-8')
    except UnicodeDecodeError as le:
        raise MalformedQueryError(query, "escape sequence is not UTF-8 in %r: %s" % (s, le))

def parse_query(query):
    """
    Parse a raw (still percent-encoded) query string into a dict mapping
    each name to the list of its values, in the order they appear.

    Empty fields are skipped, and a field without "=" is a name with an
    empty value. Raises MalformedQueryError on a bad percent-escape or
    an empty name.
    """
    query = to_unicode(query)
    params = {}
    for field in query.split('&'):
        if not field:
            continue
        k, _, v = field.partition('=')
        if not k:
            raise MalformedQueryError(query, "empty parameter name in %r" % (field,))
        params.setdefault(_unescape(query, k), []).append(_unescape(query, v))
    return params

def merge_parameters(params, injected):
    """
    Return a new parameter dict holding everything in params plus the
    protocol parameters in injected. Neither argument is modified. Any
    name in params starting with "oauth_" belongs to the protocol and
    raises InvalidParameterError.
    """
    collisions = [k for k in params if k.startswith(PROTOCOL_PREFIX)]
    if collisions:
        raise InvalidParameterError(collisions)

    merged = dict((k, list(v)) for k, v in params.items())
    for k, v in injected.items():
        if isinstance(v, str):
            merged[k] = [v]
        else:
            merged[k] = list(v)
    return merged

def normalize_parameters(params):
    items = []
    for k, v in params.items():
        # 1.0a/9.1.1 states that kvp must be sorted by key, then by
        # value, so we unpack sequence values into multiple items for
        # sorting.
        if isinstance(v, str):
            items.append((escape(k), escape(v)))
        else:
            for e in v:
                items.append((escape(k), escape(e)))

    # RFC 5849 3.4.1.3.2: sort the encoded pairs by name, then by value.
    # Escaped text is ASCII, so this is byte order.
    return '&'.join('%s=%s' % (k, v) for k, v in sorted(items))

encode_sorted_query = normalize_parameters

def canonicalize(query, injected):
    return normalize_parameters(merge_parameters(parse_query(query), injected))

def split_host(host):
    """
    Split "host[:port]" on its last colon. Returns (host, port) where
    port is None if there was none. An unbracketed IPv6 literal has no
    port.
    """
    if host.startswith('['):
        end = host.find(']')
        if end != -1:
            rest = host[end+1:]
            if rest.startswith(':') and PORT_R.fullmatch(rest[1:]):
                return host[:end+1], int(rest[1:])
        return host, None
    if host.count(':') != 1:
        return host, None
    h, _, p = host.rpartition(':')
    if PORT_R.fullmatch(p):
        return h, int(p)
    return host, None

def base_string_uri(scheme, host, path):
    scheme = scheme.lower()
    host, port = split_host(host.lower())
    uri = '%s://%s' % (scheme, host)
    if port is not None and DEFAULT_PORTS.get(scheme) != port:
        uri += ':%d' % (port,)
    return uri + path

def signature_base_string(method, scheme, host, path, canonical_query):
    sig = [
        method.upper(),
        escape(base_string_uri(scheme, host, path)),
        escape(canonical_query),
    ]
    return '&'.join(sig)
