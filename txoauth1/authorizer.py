from collections import namedtuple
from urllib.parse import urlsplit

from pyutil.assertutil import precondition
from twisted.logger import Logger

from txoauth1.nonce import RandomNonceSource, WallClock, current_timestamp
from txoauth1.oauth import OAUTH_VERSION, PROTOCOL_PREFIX, canonicalize, escape, merge_parameters, normalize_parameters, parse_query, signature_base_string, to_unicode
from txoauth1.signers import HmacSha1Signer, signing_key

log = Logger()

def _is_stringish(s):
    return isinstance(s, (str, bytes))

class Credentials(namedtuple('Credentials', ['consumer_key', 'consumer_secret', 'token', 'token_secret'])):
    """
    The consumer key/secret identify your application; token and
    token_secret identify an authorized user and may be left empty for
    two-legged OAuth. Credentials are immutable, so one instance can be
    shared by every request that signs with it.
    """
    __slots__ = ()

    def __new__(cls, consumer_key, consumer_secret, token='', token_secret=''):
        fields = (consumer_key, consumer_secret, token, token_secret)
        precondition(all(_is_stringish(f) for f in fields), "all credentials are required to be str or UTF-8 bytes", consumer_key=consumer_key, token=token)
        return super(Credentials, cls).__new__(cls, *[to_unicode(f) for f in fields])

    def __repr__(self):
        # never show the secrets
        return "Credentials(consumer_key=%r, token=%r)" % (self.consumer_key, self.token)

class RequestDescriptor(namedtuple('RequestDescriptor', ['method', 'scheme', 'host', 'path', 'raw_query'])):
    """
    A read-only view of the request being signed. host may carry a
    ":port" suffix and raw_query is the query string still in its
    percent-encoded form, without the leading "?".
    """
    __slots__ = ()

    def __new__(cls, method, scheme, host, path, raw_query=''):
        fields = (method, scheme, host, path, raw_query)
        precondition(all(_is_stringish(f) for f in fields), "all request fields are required to be str or UTF-8 bytes", method=method, scheme=scheme, host=host, path=path)
        return super(RequestDescriptor, cls).__new__(cls, *[to_unicode(f) for f in fields])

    @classmethod
    def from_uri(cls, method, uri):
        """
        uri is an absolute URI, such as
        http://api.example.com/1.0/things?a=b. Any user info and fragment
        are ignored.
        """
        parts = urlsplit(to_unicode(uri))
        precondition(parts.scheme and parts.netloc, "uri is required to be absolute", uri=uri)
        host = parts.netloc.rpartition('@')[2]
        return cls(method, parts.scheme, host, parts.path, parts.query)

class Authorizer(object):
    """
    Signs requests with a signer, a nonce source and a clock. All three
    are only read, so an Authorizer may be shared between threads; each
    signing call makes its own nonce, parameters and digest.
    """

    def __init__(self, signer=None, nonces=None, clock=None, realm=''):
        if signer is None:
            signer = HmacSha1Signer()
        if nonces is None:
            nonces = RandomNonceSource()
        if clock is None:
            clock = WallClock()
        self.signer = signer
        self.nonces = nonces
        self.clock = clock
        self.realm = realm

    def protocol_parameters(self, credentials):
        return {
            'oauth_consumer_key': credentials.consumer_key,
            'oauth_nonce': self.nonces.next_nonce(),
            'oauth_signature_method': self.signer.method,
            'oauth_timestamp': current_timestamp(self.clock),
            'oauth_token': credentials.token,
            'oauth_version': OAUTH_VERSION,
            }

    def signed_parameters(self, request, credentials):
        """
        Return a dict mapping every parameter name of the signed request,
        the query's and the protocol's (oauth_signature included), to the
        list of its values.
        """
        injected = self.protocol_parameters(credentials)
        params = merge_parameters(parse_query(request.raw_query), injected)

        base_string = signature_base_string(request.method, request.scheme, request.host, request.path, normalize_parameters(params))
        log.debug("Signature base string: {base_string}", base_string=base_string)

        params['oauth_signature'] = [self.signer.sign(signing_key(credentials), base_string)]
        return params

    def sign_as_header(self, request, credentials):
        params = self.signed_parameters(request, credentials)
        oauth_params = sorted((k, escape(v[0])) for k, v in params.items() if k.startswith(PROTOCOL_PREFIX))
        header_params = ('%s="%s"' % (k, v) for k, v in oauth_params)

        return ', '.join(['OAuth realm="%s"' % (self.realm,)] + list(header_params))

    def sign_as_query(self, request, credentials):
        return normalize_parameters(self.signed_parameters(request, credentials))

    def canonical_query(self, request, credentials):
        """ The canonical query of request before oauth_signature is
        added, with a nonce and timestamp of its own. """
        return canonicalize(request.raw_query, self.protocol_parameters(credentials))
