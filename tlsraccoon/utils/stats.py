# Author: tlsraccoon contributors, (c) 2026
# Released under Gnu GPL v2.0, see LICENSE file for details
"""Statistical tests on the distribution of server responses."""

from collections import namedtuple

import numpy as np
from scipy.stats import fisher_exact, chi2_contingency

from ..constants import EqualityResult


leak_test_result = namedtuple('leak_test_result', ['p_value', 'table'])


def response_classes(responses, oracle):
    """
    Group responses that the oracle considers equal.

    Each response is compared with the first member of every existing class
    and joins the first one it is equal to. Inconclusive comparisons count
    as not equal.

    :param list responses: :py:class:`~tlsraccoon.collector.VectorResponse`
        objects
    :param oracle: object implementing ``compare(first, second)``
    :rtype: list(list)
    """
    classes = []
    for response in responses:
        for members in classes:
            if oracle.compare(members[0].fingerprint,
                              response.fingerprint) == EqualityResult.EQUAL:
                members.append(response)
                break
        else:
            classes.append([response])
    return classes


def contingency_table(classes):
    """
    Count null byte and non-null byte responses in every class.

    :rtype: numpy.ndarray
    :return: array of shape (2, len(classes)), first row for vectors with
        null byte
    """
    table = np.zeros((2, len(classes)), dtype=np.int64)
    for column, members in enumerate(classes):
        for response in members:
            row = 0 if response.vector.has_null_byte else 1
            table[row, column] += 1
    return table


def leak_test(responses, oracle):
    """
    Test if the response class is independent of the null byte in secret.

    Uses Fisher's exact test when there are exactly two response classes
    and the chi-squared test of independence when there are more.

    :rtype: leak_test_result
    """
    table = contingency_table(response_classes(responses, oracle))
    if table.shape[1] < 2 or not all(table.sum(axis=1)):
        return leak_test_result(1.0, table)
    if table.shape[1] == 2:
        _, p_value = fisher_exact(table)
    else:
        _, p_value, _, _ = chi2_contingency(table)
    return leak_test_result(float(p_value), table)
