# Author: tlsraccoon contributors, (c) 2026
# Released under Gnu GPL v2.0, see LICENSE file for details
"""Interfaces of the objects that perform the actual TLS connections."""

from tlslite.constants import CipherSuite


class ExecutionError(Exception):
    """Crafted handshake could not be executed or observed."""

    pass


class HandshakeEngine(object):
    """
    Base class for objects able to execute crafted handshakes.

    Implementations need to construct the ClientKeyExchange deterministically
    from the secret and the null byte flag, so that two executions with the
    same parameters differ only in the behaviour of the server.
    """

    def execute(self, version, suite, workflow_variant, secret,
                has_null_byte):
        """
        Run a single crafted handshake against the server.

        :param tuple version: protocol version to negotiate
        :param int suite: the only cipher suite to advertise
        :param int workflow_variant: which messages to send after the
            ClientKeyExchange
        :param int secret: initial client DH secret
        :param bool has_null_byte: whether the premaster secret needs to
            start with a zero byte
        :return: fingerprint of the server behaviour
        :raises ExecutionError: when the handshake failed on the network level
        """
        raise NotImplementedError("Subclasses need to implement this!")

    def run_normal_handshake(self, version, suite):
        """
        Run an ordinary handshake with given version and cipher suite.

        :rtype: bool
        :return: True if the handshake executed as planned
        """
        raise NotImplementedError("Subclasses need to implement this!")

    def is_implemented(self, suite):
        """
        Check if the engine is able to negotiate the cipher suite.

        :rtype: bool
        """
        return suite in CipherSuite.ietfNames
