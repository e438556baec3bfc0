from twisted.internet import defer
from twisted.trial import unittest
from twisted.web.http_headers import Headers
from twisted.web.iweb import IAgent
from zope.interface.verify import verifyObject

from txoauth1.agent import HEADER, QUERY, OAuthAgent
from txoauth1.authorizer import Credentials
from txoauth1.errors import InvalidParameterError, MalformedQueryError
from txoauth1.test.test_authorizer import NONCE, make_authorizer

CREDS = Credentials('abcd', 'efgh', 'ijkl', 'mnop')

class FakeResponse(object):
    code = 200

class MockAgent(object):
    def __init__(self, fakeresp):
        self.fakeresp = fakeresp
        self.called = False

    def request(self, method, uri, headers=None, bodyProducer=None):
        self.called = True
        self.method = method
        self.uri = uri
        self.headers = headers
        self.bodyProducer = bodyProducer
        return defer.succeed(self.fakeresp)

class OAuthAgentTest(unittest.TestCase):
    def setUp(self):
        self.fakeresp = FakeResponse()
        self.mockagent = MockAgent(self.fakeresp)

    def test_interface(self):
        self.assertTrue(verifyObject(IAgent, OAuthAgent(self.mockagent, CREDS)))

    def test_bad_mode(self):
        self.assertRaises(AssertionError, OAuthAgent, self.mockagent, CREDS, mode='body')

    def test_header_mode(self):
        agent = OAuthAgent(self.mockagent, CREDS, make_authorizer())
        headers = Headers({b'User-Agent': [b'txoauth1']})
        producer = object()
        d = agent.request(b'GET', b'http://host.net/resource?a=b&c=d', headers, producer)

        self.assertIdentical(self.successResultOf(d), self.fakeresp)
        self.assertEqual(self.mockagent.method, b'GET')
        self.assertEqual(self.mockagent.uri, b'http://host.net/resource?a=b&c=d')
        self.assertIdentical(self.mockagent.bodyProducer, producer)
        self.assertEqual(self.mockagent.headers.getRawHeaders(b'User-Agent'), [b'txoauth1'])
        [auth] = self.mockagent.headers.getRawHeaders(b'Authorization')
        self.assertEqual(auth, b'OAuth realm="", oauth_consumer_key="abcd", oauth_nonce="' + NONCE.encode('ascii') + b'", oauth_signature="1tmN5A%2BYWWmCKpm0beiLUpsU1Ec%3D", oauth_signature_method="HMAC-SHA1", oauth_timestamp="1234567890", oauth_token="ijkl", oauth_version="1.0"')

        # the caller's headers are left alone
        self.assertFalse(headers.hasHeader(b'Authorization'))

    def test_header_mode_no_headers(self):
        agent = OAuthAgent(self.mockagent, CREDS, make_authorizer(), mode=HEADER)
        agent.request(b'GET', b'http://host.net/resource')
        self.assertTrue(self.mockagent.headers.hasHeader(b'Authorization'))

    def test_query_mode(self):
        agent = OAuthAgent(self.mockagent, CREDS, make_authorizer(), mode=QUERY)
        d = agent.request(b'GET', b'http://host.net/resource?c=d&a=b')

        self.assertIdentical(self.successResultOf(d), self.fakeresp)
        self.assertEqual(self.mockagent.uri, b'http://host.net/resource?a=b&c=d&oauth_consumer_key=abcd&oauth_nonce=' + NONCE.encode('ascii') + b'&oauth_signature=1tmN5A%2BYWWmCKpm0beiLUpsU1Ec%3D&oauth_signature_method=HMAC-SHA1&oauth_timestamp=1234567890&oauth_token=ijkl&oauth_version=1.0')
        self.assertFalse(self.mockagent.headers.hasHeader(b'Authorization'))

    def test_malformed_query_errbacks(self):
        agent = OAuthAgent(self.mockagent, CREDS, make_authorizer())
        d = agent.request(b'GET', b'http://host.net/resource?a=%zz')
        self.failureResultOf(d, MalformedQueryError)
        self.assertFalse(self.mockagent.called)

    def test_caller_oauth_parameter_errbacks(self):
        agent = OAuthAgent(self.mockagent, CREDS, make_authorizer(), mode=HEADER)
        d = agent.request(b'GET', b'http://host.net/resource?oauth_callback=oob')
        self.failureResultOf(d, InvalidParameterError)
        self.assertFalse(self.mockagent.called)

    def test_reserved_parameter_errbacks(self):
        agent = OAuthAgent(self.mockagent, CREDS, make_authorizer(), mode=QUERY)
        d = agent.request(b'GET', b'http://host.net/resource?oauth_token=x')
        self.failureResultOf(d, InvalidParameterError)
        self.assertFalse(self.mockagent.called)
