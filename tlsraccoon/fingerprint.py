# Author: tlsraccoon contributors, (c) 2026
# Released under Gnu GPL v2.0, see LICENSE file for details
"""Summaries of server behaviour and their comparison"""

from tlslite.constants import ContentType, HandshakeType, AlertLevel, \
        AlertDescription, TLSEnum

from .constants import EqualityResult


class SocketState(TLSEnum):
    """State of the connection after the last message was received."""

    CLOSED = 0
    UP = 1
    TIMEOUT = 2
    DATA_AVAILABLE = 3
    PEER_WRITE_CLOSED = 4
    SOCKET_EXCEPTION = 5


class EqualityError(TLSEnum):
    """First difference found between two fingerprints."""

    NONE = 0
    MESSAGE_COUNT = 1
    MESSAGE_CLASS = 2
    RECORD_COUNT = 3
    SOCKET_STATE = 4


_MESSAGE_FORMATS = {
    ContentType.change_cipher_spec:
        ("ChangeCipherSpec", 1, lambda data: ""),
    ContentType.alert:
        ("Alert", 2, lambda data: "{0}, {1}".format(
            AlertLevel.toStr(data[0]), AlertDescription.toStr(data[1]))),
    ContentType.handshake:
        ("Handshake", 1, lambda data: HandshakeType.toStr(data[0])),
    ContentType.application_data:
        ("ApplicationData", 0, lambda data: "len={0}".format(len(data))),
}
"""Name, minimal payload size and argument formatter for known records."""


def describe_message(content_type, data):
    """
    Summarise a received record.

    Payloads too short for their content type are reported as
    ``Name(invalid size)``, ChangeCipherSpec additionally needs to be
    exactly one byte long.
    """
    if content_type not in _MESSAGE_FORMATS:
        return "Message(content_type={0}, first_byte={1}, len={2})".format(
            ContentType.toStr(content_type), data[0] if data else None,
            len(data))
    name, min_size, arguments = _MESSAGE_FORMATS[content_type]
    too_long = content_type == ContentType.change_cipher_spec and \
        len(data) > min_size
    if len(data) < min_size or too_long:
        return "{0}(invalid size)".format(name)
    return "{0}({1})".format(name, arguments(data))


class ResponseFingerprint(object):
    """
    Observable reaction of the server to one handshake.

    :ivar tuple messages: descriptions of the received messages, in order
    :ivar int record_count: number of received records
    :ivar int socket_state: one of :py:class:`SocketState`
    """

    def __init__(self, messages, record_count, socket_state):
        self.messages = tuple(messages)
        self.record_count = record_count
        self.socket_state = socket_state

    @classmethod
    def from_records(cls, records, socket_state):
        """
        Create fingerprint from received records.

        :param list records: ``(content_type, payload)`` tuples
        :param int socket_state: connection state after the last record
        """
        records = list(records)
        messages = [describe_message(c_type, bytearray(data))
                    for c_type, data in records]
        return cls(messages, len(records), socket_state)

    def __eq__(self, other):
        return isinstance(other, ResponseFingerprint) and \
            check_equality(self, other) == EqualityError.NONE

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.messages, self.record_count, self.socket_state))

    def __repr__(self):
        return ("ResponseFingerprint(messages={0!r}, record_count={1}, "
                "socket_state={2})".format(
                    list(self.messages), self.record_count,
                    SocketState.toStr(self.socket_state)))


def check_equality(first, second):
    """
    Find the first difference between two fingerprints.

    :rtype: int
    :return: one of :py:class:`EqualityError`
    """
    if len(first.messages) != len(second.messages):
        return EqualityError.MESSAGE_COUNT
    if first.messages != second.messages:
        return EqualityError.MESSAGE_CLASS
    if first.record_count != second.record_count:
        return EqualityError.RECORD_COUNT
    if first.socket_state != second.socket_state:
        return EqualityError.SOCKET_STATE
    return EqualityError.NONE


class FingerprintOracle(object):
    """Decide if two :py:class:`ResponseFingerprint` objects are equal."""

    def compare(self, first, second):
        """
        Compare two fingerprints.

        :rtype: int
        :return: one of :py:class:`~tlsraccoon.constants.EqualityResult`
        """
        if not isinstance(first, ResponseFingerprint) or \
                not isinstance(second, ResponseFingerprint):
            return EqualityResult.INCONCLUSIVE
        # local I/O errors don't describe server behaviour
        if SocketState.SOCKET_EXCEPTION in (first.socket_state,
                                            second.socket_state):
            return EqualityResult.INCONCLUSIVE
        if check_equality(first, second) == EqualityError.NONE:
            return EqualityResult.EQUAL
        return EqualityResult.UNEQUAL
