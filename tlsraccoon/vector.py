# Author: tlsraccoon contributors, (c) 2026
# Released under Gnu GPL v2.0, see LICENSE file for details
"""Test vectors and construction of balanced vector sets."""

from collections import namedtuple

from .constants import WorkflowVariant, version_name, suite_name


class Vector(namedtuple('Vector', ['workflow_variant', 'version',
                                   'cipher_suite', 'has_null_byte'])):
    """
    Identifier of a single crafted handshake.

    :ivar int workflow_variant: one of
        :py:class:`~tlsraccoon.constants.WorkflowVariant`
    :ivar tuple version: protocol version, e.g. ``(3, 3)``
    :ivar int cipher_suite: IANA id of the negotiated cipher suite
    :ivar bool has_null_byte: whether the premaster secret derived from the
        crafted key share starts with a zero byte
    """

    __slots__ = ()

    def __str__(self):
        return ("WorkflowType={0}, version={1}, suite={2}, "
                "pmsWithNullByte={3}".format(
                    WorkflowVariant.toStr(self.workflow_variant),
                    version_name(self.version),
                    suite_name(self.cipher_suite),
                    self.has_null_byte))


def build_vector_set(version, suite, workflow_variant, count, rng):
    """
    Create a randomly ordered set of paired vectors.

    The returned list has exactly `count` vectors with a null byte and
    `count` without, shuffled with `rng`.

    There is no secret parameter: vectors don't carry the DH secret, the
    caller passes it alongside the set to
    :py:meth:`~tlsraccoon.collector.ResponseCollector.collect`.

    :param tuple version: protocol version
    :param int suite: cipher suite id
    :param int workflow_variant: workflow variant to use for all vectors
    :param int count: number of pairs
    :param random.Random rng: source of randomness for the permutation
    :rtype: list(Vector)
    """
    if count < 0:
        raise ValueError("Number of vector pairs can't be negative")
    vectors = []
    for _ in range(count):
        vectors.append(Vector(workflow_variant, version, suite, True))
        vectors.append(Vector(workflow_variant, version, suite, False))
    rng.shuffle(vectors)
    return vectors
