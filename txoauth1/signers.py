import base64, hashlib, hmac

from zope.interface import Interface, Attribute, implementer

from txoauth1.oauth import escape

HMAC_SHA1 = 'HMAC-SHA1'

class ISigner(Interface):
    method = Attribute("The value sent as oauth_signature_method.")

    def sign(signing_key, base_string):
        """
        Return the signature of base_string, as text, made with
        signing_key.
        """

def signing_key(credentials):
    return '%s&%s' % (escape(credentials.consumer_secret), escape(credentials.token_secret))

@implementer(ISigner)
class HmacSha1Signer(object):
    """
    A new hmac object is made for every call, so one signer can be
    shared by any number of threads signing at once.
    """
    method = HMAC_SHA1

    def sign(self, signing_key, base_string):
        digest = hmac.new(signing_key.encode('utf-8'), base_string.encode('utf-8'), hashlib.sha1).digest()
        return base64.b64encode(digest).decode('ascii')
