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

"""Base exceptions for the gcecloud library.

Every module defines its own Error class deriving from Error here, and every
exception raised on purpose by the library derives from one of those. Callers
that only care whether the library rejected its input can catch
exceptions.Error.
"""


class _Error(Exception):
  """A base exception for all errors raised on purpose by gcecloud."""


class Error(_Error):
  """A base exception for all user recoverable errors.

  Any exception that extends this class will not be printed with a stack
  trace when surfaced by a command line front end.
  """
