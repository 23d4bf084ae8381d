# Author: tlsraccoon contributors, (c) 2026
# Released under Gnu GPL v2.0, see LICENSE file for details
"""Identifiers and result values used by the Direct Raccoon probe."""

from tlslite.constants import TLSEnum, CipherSuite


SSL3 = (3, 0)
TLS1_0 = (3, 1)
TLS1_1 = (3, 2)
TLS1_2 = (3, 3)

ELIGIBLE_VERSIONS = (SSL3, TLS1_0, TLS1_1, TLS1_2)
"""Protocol versions in which the premaster secret is the raw DH secret
with leading zero bytes stripped."""

_VERSION_NAMES = {SSL3: "SSLv3",
                  TLS1_0: "TLSv1.0",
                  TLS1_1: "TLSv1.1",
                  TLS1_2: "TLSv1.2"}


def version_name(version):
    """Return human readable name of a ``(major, minor)`` version tuple."""
    return _VERSION_NAMES.get(tuple(version), str(version))


def suite_name(suite):
    """Return IETF name of the cipher suite, or its hex id if unknown."""
    return CipherSuite.ietfNames.get(suite, "0x{0:04x}".format(suite))


def uses_dh(suite):
    """
    Check if the cipher suite uses finite field Diffie-Hellman key exchange.

    Both ephemeral (DHE) and static (DH) key exchanges qualify, elliptic
    curve ones do not.

    :rtype: bool
    """
    if suite in CipherSuite.dhAllSuites:
        return True
    name = CipherSuite.ietfNames.get(suite)
    if not name:
        return False
    return "_DHE_" in name or "_DH_" in name


class WorkflowVariant(TLSEnum):
    """
    Shapes of the crafted handshake tail sent after ServerHelloDone.

    ``INITIAL`` is a placeholder and never tested, use :py:attr:`testable`
    to iterate over the variants that are.
    """

    INITIAL = 0
    CKE = 1
    CKE_CCS = 2
    CKE_CCS_FIN = 3

    testable = (CKE, CKE_CCS, CKE_CCS_FIN)


class EqualityResult(TLSEnum):
    """Outcome of comparing two fingerprints."""

    EQUAL = 0
    UNEQUAL = 1
    INCONCLUSIVE = 2


class OracleResult(TLSEnum):
    """Classification of the responses for a single cipher suite."""

    INCONCLUSIVE = 0
    NOT_VULNERABLE = 1
    POTENTIALLY_VULNERABLE = 2
    VULNERABLE = 3


class TestResult(TLSEnum):
    """Verdict of the whole probe."""

    TRUE = 1
    FALSE = 2
    ERROR_DURING_TEST = 3
    COULD_NOT_TEST = 4
