from urllib.parse import urlsplit, urlunsplit

from pyutil.assertutil import precondition
from twisted.internet import defer
from twisted.logger import Logger
from twisted.web.http_headers import Headers
from twisted.web.iweb import IAgent
from zope.interface import implementer

from txoauth1.authorizer import Authorizer, RequestDescriptor
from txoauth1.errors import OAuthError
from txoauth1.oauth import to_unicode

log = Logger()

HEADER, QUERY = 'header', 'query'

@implementer(IAgent)
class OAuthAgent(object):
    """
    Wraps another IAgent and signs every request passed through it with
    credentials, either in the Authorization header (mode=HEADER) or by
    replacing the URI's query with the signed query (mode=QUERY).

    The caller's Headers object is never modified; the wrapped agent
    gets a copy. If the request can't be signed the returned deferred
    errbacks with the OAuthError and the wrapped agent is not called.
    """

    def __init__(self, agent, credentials, authorizer=None, mode=HEADER):
        precondition(mode in (HEADER, QUERY), "mode is required to be HEADER or QUERY", mode=mode)
        if authorizer is None:
            authorizer = Authorizer()
        self.agent = agent
        self.credentials = credentials
        self.authorizer = authorizer
        self.mode = mode

    def request(self, method, uri, headers=None, bodyProducer=None):
        if headers is None:
            headers = Headers()
        else:
            headers = headers.copy()

        try:
            uri = self._sign(method, uri, headers)
        except OAuthError:
            return defer.fail()

        return self.agent.request(method, uri, headers, bodyProducer)

    def _sign(self, method, uri, headers):
        log.debug("Signing {method} request in {mode} mode", method=to_unicode(method), mode=self.mode)
        req = RequestDescriptor.from_uri(method, uri)
        if self.mode == HEADER:
            value = self.authorizer.sign_as_header(req, self.credentials)
            headers.setRawHeaders(b'Authorization', [value.encode('utf-8')])
            return uri

        query = self.authorizer.sign_as_query(req, self.credentials)
        parts = urlsplit(to_unicode(uri))
        return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment)).encode('utf-8')
