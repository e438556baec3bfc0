class OAuthError(Exception):
    """Base exception for all request-signing errors."""

    def __init__(self, msg, description=''):
        super(OAuthError, self).__init__(msg)
        self.msg = msg
        self.description = description

    def __str__(self):
        return self.__repr__()

    def __repr__(self):
        if self.description:
            return "%s: %s" % (self.msg, self.description)
        return self.msg

class MalformedQueryError(OAuthError):
    """The raw query string could not be parsed. Signing it anyway would
    sign a different parameter set than the server will see."""

    def __init__(self, query, reason):
        super(MalformedQueryError, self).__init__("Could not parse query string.", reason)
        self.query = query

    def __repr__(self):
        return "%s query: %r" % (self.description, self.query)

class InvalidParameterError(OAuthError):
    """The caller supplied parameters that are reserved for the protocol."""

    def __init__(self, names):
        self.names = sorted(names)
        super(InvalidParameterError, self).__init__("Reserved OAuth parameters supplied by caller.", ', '.join(self.names))

class RandomSourceError(OAuthError):
    """The secure random source could not produce a nonce."""

    def __init__(self, reason):
        super(RandomSourceError, self).__init__("Secure random source unavailable.", repr(reason))
        self.reason = reason
