# Author: tlsraccoon contributors, (c) 2026
# Released under Gnu GPL v2.0, see LICENSE file for details
"""Parallel execution of independent handshake tasks."""

from multiprocessing.pool import ThreadPool


MAX_THREADS = 20
"""Upper limit on concurrent connections when not set explicitly."""


def _run_task(task):
    return task.execute()


class ParallelExecutor(object):
    """
    Run batches of tasks concurrently.

    Tasks are expected to capture their own failures, see
    :py:meth:`~tlsraccoon.collector.FingerprintTask.execute`.
    """

    def __init__(self, threads=None):
        """
        :param int threads: number of concurrently running tasks, ``None``
            to use one thread per task (up to :py:data:`MAX_THREADS`)
        """
        if threads is not None and threads < 1:
            raise ValueError("At least one thread is necessary")
        self.threads = threads

    def _pool_size(self, task_count):
        if self.threads is not None:
            return min(self.threads, task_count)
        return min(MAX_THREADS, task_count)

    def execute_batch(self, tasks):
        """
        Execute all tasks and wait for them to finish.

        :param list tasks: objects with ``execute()`` method
        :return: the tasks, in the order they were provided in
        :rtype: list
        """
        tasks = list(tasks)
        if not tasks:
            return tasks
        size = self._pool_size(len(tasks))
        if size == 1:
            return [_run_task(task) for task in tasks]
        with ThreadPool(size) as pool:
            return pool.map(_run_task, tasks, chunksize=1)
