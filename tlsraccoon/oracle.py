# Author: tlsraccoon contributors, (c) 2026
# Released under Gnu GPL v2.0, see LICENSE file for details
"""Detection of differences between null byte and non-null byte responses"""

from itertools import product

from .constants import EqualityResult, OracleResult, WorkflowVariant, \
        version_name, suite_name


class CipherSuiteFingerprint(object):
    """
    Responses collected for one version, cipher suite and workflow variant.

    :ivar list responses: collected
        :py:class:`~tlsraccoon.collector.VectorResponse` objects
    :ivar bool handshake_working: whether an ordinary handshake with the
        same parameters succeeded, None if not checked
    :ivar int result: last classification, one of
        :py:class:`~tlsraccoon.constants.OracleResult`
    :ivar tuple unequal_pair: the first pair of responses that were found
        to differ, None if there was none
    :ivar float p_value: result of the
        :py:func:`~tlsraccoon.utils.stats.leak_test`, None if not computed
    """

    def __init__(self, version, cipher_suite, workflow_variant, responses):
        self.version = version
        self.cipher_suite = cipher_suite
        self.workflow_variant = workflow_variant
        self.responses = list(responses)
        self.handshake_working = None
        self.escalated = False
        self.result = OracleResult.INCONCLUSIVE
        self.unequal_pair = None
        self.p_value = None

    def set_handshake_working(self, value):
        """Record the result of the baseline handshake, can be done once."""
        if self.handshake_working is not None:
            raise ValueError("Baseline handshake result already recorded")
        self.handshake_working = bool(value)

    def append_responses(self, responses):
        """Add responses from the additional tests, can be done once."""
        if self.escalated:
            raise ValueError("Responses were already extended")
        self.responses.extend(responses)
        self.escalated = True

    @property
    def null_byte_responses(self):
        return [i for i in self.responses if i.vector.has_null_byte]

    @property
    def non_null_byte_responses(self):
        return [i for i in self.responses if not i.vector.has_null_byte]

    def is_potentially_vulnerable(self):
        return self.result == OracleResult.POTENTIALLY_VULNERABLE

    def is_considered_vulnerable(self):
        return self.result == OracleResult.VULNERABLE

    def __repr__(self):
        return ("CipherSuiteFingerprint(version={0}, suite={1}, "
                "workflow={2}, responses={3}, handshake_working={4}, "
                "result={5})".format(
                    version_name(self.version),
                    suite_name(self.cipher_suite),
                    WorkflowVariant.toStr(self.workflow_variant),
                    len(self.responses),
                    self.handshake_working,
                    OracleResult.toStr(self.result)))


def find_unequal_pair(null_byte_responses, non_null_byte_responses, oracle):
    """
    Compare every response of one group with every response of the other.

    Inconclusive comparisons are ignored.

    :return: first pair of responses that the oracle considered different,
        None if there was none
    """
    for first, second in product(null_byte_responses,
                                 non_null_byte_responses):
        if oracle.compare(first.fingerprint, second.fingerprint) == \
                EqualityResult.UNEQUAL:
            return first, second
    return None


def classify(fingerprint, oracle):
    """
    Classify the responses collected in the fingerprint.

    Any difference between null byte and non-null byte responses makes the
    suite potentially vulnerable before the additional tests were run and
    vulnerable after them.

    The result is stored in the fingerprint and returned.

    :param CipherSuiteFingerprint fingerprint: collected responses
    :param oracle: object implementing ``compare(first, second)``
    :rtype: int
    :return: one of :py:class:`~tlsraccoon.constants.OracleResult`
    """
    pair = find_unequal_pair(fingerprint.null_byte_responses,
                             fingerprint.non_null_byte_responses,
                             oracle)
    fingerprint.unequal_pair = pair
    if pair is None:
        fingerprint.result = OracleResult.NOT_VULNERABLE
    elif fingerprint.escalated:
        fingerprint.result = OracleResult.VULNERABLE
    else:
        fingerprint.result = OracleResult.POTENTIALLY_VULNERABLE
    return fingerprint.result
