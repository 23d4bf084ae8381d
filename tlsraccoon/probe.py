# Author: tlsraccoon contributors, (c) 2026
# Released under Gnu GPL v2.0, see LICENSE file for details
"""Scan for the Direct Raccoon timing side channel in DH key exchange."""

import logging
from collections import namedtuple

from .constants import ELIGIBLE_VERSIONS, WorkflowVariant, OracleResult, \
        TestResult, uses_dh, version_name, suite_name
from .collector import ResponseCollector
from .config import ScannerConfig
from .executor import ParallelExecutor
from .fingerprint import FingerprintOracle
from .oracle import CipherSuiteFingerprint, classify
from .vector import build_vector_set


VersionSuiteListPair = namedtuple('VersionSuiteListPair',
                                  ['version', 'cipher_suites'])
"""Cipher suites the server accepted in given protocol version."""


DirectRaccoonResult = namedtuple('DirectRaccoonResult',
                                 ['fingerprints', 'verdict'])
"""Output of the probe: list of
:py:class:`~tlsraccoon.oracle.CipherSuiteFingerprint` (None if the scan
didn't finish) and one of :py:class:`~tlsraccoon.constants.TestResult`."""


class SiteReport(object):
    """
    Results of previous scans of the server.

    :ivar dict versions: protocol version tuples mapped to booleans saying
        if the server supports them
    :ivar bool supports_dh: whether the server negotiates DH key exchange
    :ivar list version_suite_pairs: list of :py:class:`VersionSuiteListPair`,
        None if cipher suites weren't scanned
    """

    def __init__(self, versions=None, supports_dh=None,
                 version_suite_pairs=None):
        self.versions = dict(versions or {})
        self.supports_dh = supports_dh
        self.version_suite_pairs = version_suite_pairs

    def supports_version(self, version):
        return self.versions.get(tuple(version)) is True


class DirectRaccoonProbe(object):
    """
    Check if the server behaviour depends on leading zero in premaster secret.

    For every DH cipher suite the server supports in SSLv3 up to TLS 1.2,
    and every workflow variant, it sends a set of handshakes that differ only
    in whether the premaster secret starts with a zero byte. If the server
    answers them differently, and does so also in a bigger second round of
    tests, it's considered vulnerable.
    """

    name = "Direct Raccoon"

    def __init__(self, config, engine, baseline_runner=None, executor=None,
                 oracle=None):
        """
        :param ScannerConfig config: scan settings, None for defaults
        :param engine: object implementing
            :py:class:`~tlsraccoon.engine.HandshakeEngine` interface
        :param baseline_runner: callable taking version and cipher suite,
            returning True if ordinary handshake works; ``None`` to use
            engine's ``run_normal_handshake``
        :param executor: object with ``execute_batch(tasks)`` method
        :param oracle: object with ``compare(first, second)`` method
        """
        if config is None:
            config = ScannerConfig()
        self.config = config
        self.engine = engine
        if baseline_runner is None:
            baseline_runner = engine.run_normal_handshake
        self.baseline_runner = baseline_runner
        if executor is None:
            executor = ParallelExecutor(config.threads)
        self.collector = ResponseCollector(engine, executor)
        if oracle is None:
            oracle = FingerprintOracle()
        self.oracle = oracle
        self.server_supported_suites = None

    def can_be_executed(self, report):
        """Check if the site report allows for running the probe."""
        if not any(report.supports_version(i) for i in ELIGIBLE_VERSIONS):
            return False
        if report.version_suite_pairs is None:
            return False
        return report.supports_dh is True

    def adjust_config(self, report):
        self.server_supported_suites = list(report.version_suite_pairs)

    def get_could_not_execute_result(self):
        return DirectRaccoonResult(None, TestResult.COULD_NOT_TEST)

    def run(self, report):
        """
        Execute the probe if the report permits it.

        Never raises, malformed report data results in
        ``TestResult.ERROR_DURING_TEST``.
        """
        try:
            executable = self.can_be_executed(report)
            if executable:
                self.adjust_config(report)
        except Exception:
            logging.error("Could not scan for %s", self.name, exc_info=True)
            return DirectRaccoonResult(None, TestResult.ERROR_DURING_TEST)
        if not executable:
            logging.info("Can't run %s probe, requirements not met",
                         self.name)
            return self.get_could_not_execute_result()
        return self.execute_test()

    def execute_test(self):
        """
        Scan all eligible cipher suites.

        :rtype: DirectRaccoonResult
        """
        try:
            results = []
            for version, suite in self._eligible_suites():
                handshake_working = self.is_normal_handshake_working(version,
                                                                     suite)
                for variant in self.config.workflow_variants:
                    fingerprint = self.get_cipher_suite_fingerprint(
                        version, suite, variant)
                    fingerprint.set_handshake_working(handshake_working)
                    results.append(fingerprint)
            if any(i.is_considered_vulnerable() for i in results):
                return DirectRaccoonResult(results, TestResult.TRUE)
            return DirectRaccoonResult(results, TestResult.FALSE)
        except Exception:
            logging.error("Could not scan for %s", self.name, exc_info=True)
            return DirectRaccoonResult(None, TestResult.ERROR_DURING_TEST)

    def _eligible_suites(self):
        for pair in self.server_supported_suites or []:
            version = tuple(pair.version)
            if version not in ELIGIBLE_VERSIONS:
                continue
            for suite in pair.cipher_suites:
                if uses_dh(suite) and self.engine.is_implemented(suite):
                    yield version, suite

    def is_normal_handshake_working(self, version, suite):
        try:
            return bool(self.baseline_runner(version, suite))
        except Exception:
            logging.warning("Could not perform initial handshake",
                            exc_info=True)
            return False

    def get_cipher_suite_fingerprint(self, version, suite, variant):
        """
        Collect and classify responses for a single combination.

        :rtype: CipherSuiteFingerprint
        """
        logging.debug("Testing %s, %s, %s", version_name(version),
                      suite_name(suite), WorkflowVariant.toStr(variant))
        secret = self.config.draw_secret()
        responses = self.create_vector_response_list(
            version, suite, variant, secret, self.config.iterations)
        fingerprint = CipherSuiteFingerprint(version, suite, variant,
                                             responses)
        classify(fingerprint, self.oracle)
        if fingerprint.is_potentially_vulnerable():
            logging.debug("Found non identical answers, performing %s "
                          "additional tests",
                          2 * self.config.escalation_iterations)
            fingerprint.append_responses(self.create_vector_response_list(
                version, suite, variant, secret,
                self.config.escalation_iterations))
            classify(fingerprint, self.oracle)
        if self.config.analysis and self.check_analysis_availability():
            from .utils.stats import leak_test
            fingerprint.p_value = leak_test(fingerprint.responses,
                                            self.oracle).p_value
        logging.info("%s, %s, %s: %s", version_name(version),
                     suite_name(suite), WorkflowVariant.toStr(variant),
                     OracleResult.toStr(fingerprint.result))
        return fingerprint

    def create_vector_response_list(self, version, suite, variant, secret,
                                     count):
        vectors = build_vector_set(version, suite, variant, count,
                                   self.config.rng)
        return self.collector.collect(vectors, secret)

    @staticmethod
    def check_analysis_availability():
        """
        Checks if additional packages are installed so statistics can run.

        :return: bool Indicating if it is okay to run
        """
        try:
            from .utils.stats import leak_test
        except ImportError:
            return False
        return True
