#!/usr/bin/env python

# Author: tlsraccoon contributors
# Released under Gnu GPL v2.0, see LICENSE file for details

from setuptools import setup

setup(name="tlsraccoon",
      version="0.1.0",
      description="Detection of the Direct Raccoon side channel in TLS "
                  "servers.",
      license="GPLv2",
      install_requires=["tlslite-ng >= 0.8.2"],
      extras_require={
          "analysis": [
              # diagnostic p-values in tlsraccoon.utils.stats
              "numpy",
              "scipy",
          ],
          "test": [
              "pytest",
          ],
      },
      packages=["tlsraccoon", "tlsraccoon.utils"])
