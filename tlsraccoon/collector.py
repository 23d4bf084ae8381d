# Author: tlsraccoon contributors, (c) 2026
# Released under Gnu GPL v2.0, see LICENSE file for details
"""Execution of vectors and collection of server responses."""

import logging
from collections import namedtuple

from .vector import Vector


ExecutionRequest = namedtuple('ExecutionRequest',
                              ['version', 'cipher_suite', 'workflow_variant',
                               'secret', 'has_null_byte'])
"""Parameters of a single crafted handshake."""


VectorResponse = namedtuple('VectorResponse', ['vector', 'fingerprint'])
"""Fingerprint of the server behaviour when handling the vector."""


class FingerprintTask(object):
    """
    Single crafted handshake to be run by the
    :py:class:`~tlsraccoon.executor.ParallelExecutor`.

    :ivar ExecutionRequest request: parameters of the handshake
    :ivar fingerprint: result of the execution, None if it failed
    :ivar Exception error: exception raised by the engine, if any
    """

    def __init__(self, request, engine):
        self.request = request
        self.engine = engine
        self.fingerprint = None
        self.error = None
        self.executed = False

    @property
    def has_error(self):
        """Whether the task failed or wasn't run at all."""
        return not self.executed or self.error is not None

    def execute(self):
        """Run the handshake, capture the fingerprint or the failure."""
        req = self.request
        try:
            self.fingerprint = self.engine.execute(req.version,
                                                   req.cipher_suite,
                                                   req.workflow_variant,
                                                   req.secret,
                                                   req.has_null_byte)
        except Exception as exc:
            logging.debug("Task %r failed: %r", req, exc)
            self.error = exc
        self.executed = True
        return self

    def __repr__(self):
        return "FingerprintTask(request={0!r}, has_error={1})".format(
            self.request, self.has_error)


class ResponseCollector(object):
    """Sends vectors to the server and gathers the fingerprints."""

    def __init__(self, engine, executor):
        """
        :param engine: object implementing
            :py:meth:`~tlsraccoon.engine.HandshakeEngine.execute`
        :param executor: object implementing ``execute_batch(tasks)``
        """
        self.engine = engine
        self.executor = executor

    def collect(self, vectors, secret):
        """
        Execute all vectors as a single batch.

        Vectors that failed to produce a fingerprint are logged and left out
        of the result.

        :param list(Vector) vectors: vectors to execute
        :param int secret: initial DH secret shared by all the vectors
        :rtype: list(VectorResponse)
        """
        tasks = []
        for vector in vectors:
            request = ExecutionRequest(vector.version,
                                       vector.cipher_suite,
                                       vector.workflow_variant,
                                       secret,
                                       vector.has_null_byte)
            tasks.append(FingerprintTask(request, self.engine))

        finished = self.executor.execute_batch(tasks)

        responses = []
        for task in finished:
            req = task.request
            vector = Vector(req.workflow_variant, req.version,
                            req.cipher_suite, req.has_null_byte)
            if task.has_error:
                logging.warning("Could not extract fingerprint for %s;",
                                vector)
                continue
            responses.append(VectorResponse(vector, task.fingerprint))
        return responses
