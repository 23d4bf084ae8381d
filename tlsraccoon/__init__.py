"""
Scanner for the Direct Raccoon side channel in TLS servers.

The :py:class:`~tlsraccoon.probe.DirectRaccoonProbe` sends handshakes that
differ only in whether the DH premaster secret starts with a zero byte,
using the engine provided by the caller
(see :py:class:`~tlsraccoon.engine.HandshakeEngine`), and compares the server
responses with :py:mod:`tlsraccoon.oracle`.
"""
# Author: tlsraccoon contributors, (c) 2026
# Released under Gnu GPL v2.0, see LICENSE file for details
