# Author: tlsraccoon contributors, (c) 2026
# Released under Gnu GPL v2.0, see LICENSE file for details
"""Settings of the Direct Raccoon scan."""

import random

from .constants import WorkflowVariant


class ScannerConfig(object):
    """
    Parameters of the scan.

    :ivar int iterations: number of null byte/non-null byte vector pairs
        sent in the first round
    :ivar int escalation_iterations: number of pairs sent additionally
        when the first round showed differences
    :ivar int threads: maximum number of concurrent connections, None for
        automatic
    :ivar random.Random rng: source of the DH secrets and vector order
    :ivar bool analysis: whether to compute the diagnostic p-values when
        numpy and scipy are available
    :ivar tuple workflow_variants: workflow variants to test, all testable
        ones by default
    """

    def __init__(self, iterations=10, escalation_iterations=40, threads=None,
                 rng=None, analysis=True, workflow_variants=None):
        if iterations < 0 or escalation_iterations < 0:
            raise ValueError("Number of iterations can't be negative")
        if threads is not None and threads < 1:
            raise ValueError("At least one thread is necessary")
        self.iterations = iterations
        self.escalation_iterations = escalation_iterations
        self.threads = threads
        if rng is None:
            rng = random.SystemRandom()
        self.rng = rng
        self.analysis = analysis
        if workflow_variants is None:
            workflow_variants = WorkflowVariant.testable
        workflow_variants = tuple(workflow_variants)
        if any(i not in WorkflowVariant.testable for i in workflow_variants):
            raise ValueError("Only testable workflow variants can be used")
        self.workflow_variants = workflow_variants

    def draw_secret(self):
        """Return a new random initial client DH secret."""
        return self.rng.randrange(1, 2**32)
