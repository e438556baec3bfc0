"""
Sign HTTP requests with OAuth 1.0a (RFC 5849) HMAC-SHA1 signatures.

    credentials = Credentials('consumer key', 'consumer secret', 'token', 'token secret')
    req = RequestDescriptor.from_uri('GET', 'http://api.example.com/1.0/things?q=coffee')
    header = Authorizer().sign_as_header(req, credentials)

or, to sign everything sent through a twisted.web.client.Agent:

    agent = OAuthAgent(Agent(reactor), credentials)
"""

from txoauth1._version import __version__
__version__ # hush pyflakes

from txoauth1.agent import HEADER, QUERY, OAuthAgent
from txoauth1.authorizer import Authorizer, Credentials, RequestDescriptor
from txoauth1.errors import InvalidParameterError, MalformedQueryError, OAuthError, RandomSourceError
from txoauth1.nonce import INonceSource, RandomNonceSource, WallClock
from txoauth1.signers import HMAC_SHA1, HmacSha1Signer, ISigner

__all__ = ['Authorizer', 'Credentials', 'RequestDescriptor', 'OAuthAgent', 'HEADER', 'QUERY',
           'OAuthError', 'MalformedQueryError', 'InvalidParameterError', 'RandomSourceError',
           'INonceSource', 'RandomNonceSource', 'WallClock', 'ISigner', 'HmacSha1Signer', 'HMAC_SHA1']
