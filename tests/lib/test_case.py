# -*- coding: utf-8 -*- #
# Copyright 2026 Google LLC. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Base test classes for gcecloud tests.

Tests override SetUp() and TearDown() instead of setUp() and tearDown(). The
base class keeps CLOUDSDK_* environment variables, and therefore properties,
from leaking between tests, and resets logging after each test.
"""

import io
import os
import unittest

from gcecloud.core import log

_PROPERTY_ENV_PREFIX = 'CLOUDSDK_'


class Base(unittest.TestCase):
  """Base class for all gcecloud tests."""

  def setUp(self):
    super(Base, self).setUp()
    saved_env = {k: v for k, v in os.environ.items()
                 if k.startswith(_PROPERTY_ENV_PREFIX)}
    for name in saved_env:
      del os.environ[name]
    # Cleanups run last in, first out: restore the environment, then logging.
    self.addCleanup(log.Reset)
    self.addCleanup(self._RestoreEnvironment, saved_env)
    self.PreSetUp()
    self.SetUp()

  def tearDown(self):
    self.TearDown()
    super(Base, self).tearDown()

  def PreSetUp(self):
    pass

  def SetUp(self):
    pass

  def TearDown(self):
    pass

  def _RestoreEnvironment(self, saved_env):
    for name in [k for k in os.environ if k.startswith(_PROPERTY_ENV_PREFIX)]:
      del os.environ[name]
    os.environ.update(saved_env)


class WithOutputCapture(Base):
  """Captures gcecloud log output to self.stderr."""

  def PreSetUp(self):
    self.stderr = io.StringIO()
    log.Reset(stderr=self.stderr)

  def GetErr(self):
    return self.stderr.getvalue()

  def AssertErrContains(self, expected):
    self.assertIn(expected, self.GetErr())

  def AssertErrEquals(self, expected):
    self.assertEqual(expected, self.GetErr())


def main():
  return unittest.main()
