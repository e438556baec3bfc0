import binascii, os, time

from zope.interface import Interface, implementer

from txoauth1.errors import RandomSourceError

NONCE_BYTES = 16

class INonceSource(Interface):
    def next_nonce():
        """
        Return a fresh nonce as text. Each call must return a value that
        an attacker cannot predict.
        """

@implementer(INonceSource)
class RandomNonceSource(object):
    """
    Nonces made of NONCE_BYTES bytes from the operating system's secure
    random source, hex-encoded. os.urandom is safe to call from any
    thread, so one instance may be shared.
    """
    def __init__(self, nbytes=NONCE_BYTES):
        self.nbytes = nbytes

    def next_nonce(self):
        try:
            raw = os.urandom(self.nbytes)
        except (NotImplementedError, OSError) as le:
            raise RandomSourceError(le)
        return binascii.hexlify(raw).decode('ascii')

class WallClock(object):
    """ The system clock, with the seconds() method of IReactorTime. """
    def seconds(self):
        return time.time()

def current_timestamp(clock):
    """ Whole seconds since the Unix epoch, as a decimal string. """
    return str(int(clock.seconds()))
