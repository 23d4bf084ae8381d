# Author: tlsraccoon contributors, (c) 2026
# Released under Gnu GPL v2.0, see LICENSE file for details

import unittest
import unittest.mock as mock

from tlslite.constants import CipherSuite

from tlsraccoon.collector import ExecutionRequest, FingerprintTask, \
        ResponseCollector, VectorResponse
from tlsraccoon.constants import WorkflowVariant, TLS1_2
from tlsraccoon.engine import ExecutionError
from tlsraccoon.executor import ParallelExecutor
from tlsraccoon.vector import Vector


SUITE = CipherSuite.TLS_DHE_RSA_WITH_AES_128_CBC_SHA


class TestFingerprintTask(unittest.TestCase):
    def setUp(self):
        self.request = ExecutionRequest(TLS1_2, SUITE, WorkflowVariant.CKE,
                                        1234, True)

    def test___init__(self):
        task = FingerprintTask(self.request, mock.Mock())

        self.assertIsNone(task.fingerprint)
        self.assertIsNone(task.error)
        self.assertTrue(task.has_error)

    def test_execute(self):
        engine = mock.Mock()
        engine.execute.return_value = "fingerprint"
        task = FingerprintTask(self.request, engine)

        ret = task.execute()

        self.assertIs(ret, task)
        engine.execute.assert_called_once_with(TLS1_2, SUITE,
                                               WorkflowVariant.CKE, 1234,
                                               True)
        self.assertEqual(task.fingerprint, "fingerprint")
        self.assertFalse(task.has_error)

    def test_execute_with_error(self):
        engine = mock.Mock()
        exc = ExecutionError("connection reset")
        engine.execute.side_effect = exc
        task = FingerprintTask(self.request, engine)

        task.execute()

        self.assertTrue(task.has_error)
        self.assertIs(task.error, exc)
        self.assertIsNone(task.fingerprint)

    def test_execute_with_timeout(self):
        engine = mock.Mock()
        engine.execute.side_effect = TimeoutError("timed out")
        task = FingerprintTask(self.request, engine)

        task.execute()

        self.assertTrue(task.has_error)

    def test___repr__(self):
        task = FingerprintTask(self.request, mock.Mock())

        self.assertIn("has_error=True", repr(task))


class TestResponseCollector(unittest.TestCase):
    def setUp(self):
        self.engine = mock.Mock()
        self.engine.execute.side_effect = \
            lambda version, suite, variant, secret, null_byte: \
            ("fp", null_byte)
        self.collector = ResponseCollector(self.engine, ParallelExecutor(1))
        self.vectors = [Vector(WorkflowVariant.CKE, TLS1_2, SUITE, i % 2 == 0)
                        for i in range(6)]

    def test_collect(self):
        responses = self.collector.collect(self.vectors, 99)

        self.assertEqual(len(responses), 6)
        for vector, response in zip(self.vectors, responses):
            self.assertIsInstance(response, VectorResponse)
            self.assertEqual(response.vector, vector)
            self.assertEqual(response.fingerprint,
                             ("fp", vector.has_null_byte))

    def test_collect_passes_secret(self):
        self.collector.collect(self.vectors, 99)

        self.assertEqual(self.engine.execute.call_count, 6)
        for call in self.engine.execute.call_args_list:
            self.assertEqual(call[0][3], 99)

    def test_collect_empty(self):
        self.assertEqual(self.collector.collect([], 1), [])
        self.engine.execute.assert_not_called()

    def test_collect_with_errors(self):
        calls = []

        def execute(version, suite, variant, secret, null_byte):
            calls.append(null_byte)
            if len(calls) in (2, 5):
                raise ExecutionError("connection reset")
            return len(calls)
        self.engine.execute.side_effect = execute

        with self.assertLogs(level='WARNING') as logs:
            responses = self.collector.collect(self.vectors, 99)

        self.assertEqual(len(responses), 4)
        self.assertEqual([i.fingerprint for i in responses], [1, 3, 4, 6])
        self.assertEqual([i.vector for i in responses],
                         [self.vectors[0], self.vectors[2],
                          self.vectors[3], self.vectors[5]])
        self.assertEqual(len(logs.records), 2)
        self.assertIn("WorkflowType=CKE", logs.output[0])
        self.assertIn("version=TLSv1.2", logs.output[0])
        self.assertIn("TLS_DHE_RSA_WITH_AES_128_CBC_SHA", logs.output[0])
        self.assertIn("pmsWithNullByte=False", logs.output[0])

    def test_collect_all_failing(self):
        self.engine.execute.side_effect = ExecutionError("refused")

        with self.assertLogs(level='WARNING'):
            responses = self.collector.collect(self.vectors, 99)

        self.assertEqual(responses, [])

    def test_collect_uses_executor(self):
        executor = mock.Mock()
        executor.execute_batch.side_effect = \
            lambda tasks: [task.execute() for task in reversed(tasks)]
        collector = ResponseCollector(self.engine, executor)

        responses = collector.collect(self.vectors, 7)

        executor.execute_batch.assert_called_once()
        self.assertEqual([i.vector for i in responses],
                         list(reversed(self.vectors)))
