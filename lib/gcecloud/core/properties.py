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

"""Read and write properties for gcecloud.

Properties are grouped into sections and looked up through VALUES, e.g.
properties.VALUES.core.verbosity.Get(). Each property is backed by an
environment variable named CLOUDSDK_<SECTION>_<NAME>.
"""

import functools
import os
import re

from gcecloud.core import exceptions


_VALID_ENDPOINT_OVERRIDE_REGEX = re.compile(
    r'^'
    # require http or https for scheme
    r'(?:https?)://'
    r'(?:'  # begin netlocation
    # - domain name, e.g. 'compute.sandbox.googleapis.com'
    r'(?:[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?\.)+'
    r'(?:[A-Z]{2,6}|[A-Z0-9-]{2,})|'
    # - localhost
    r'localhost|'
    # - ipv4
    r'\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}|'
    # - ipv6
    r'\[?[A-F0-9]*:[A-F0-9:]+\]?'
    r')'  # end netlocation
    # optional port
    r'(?::\d+)?'
    # require trailing slash
    r'/'
    r'$', re.IGNORECASE)

_VERBOSITY_NAMES = ['debug', 'info', 'warning', 'error', 'critical', 'none']

_TRUE_STRINGS = ['true', '1', 'on', 'yes', 'y']
_FALSE_STRINGS = ['false', '0', 'off', 'no', 'n', '', 'none']


def Stringize(value):
  if isinstance(value, str):
    return value
  return str(value)


def _BooleanValidator(property_name, value):
  """Validates boolean properties.

  Args:
    property_name: str, the name of the property
    value: str | bool, the value to validate

  Raises:
    InvalidValueError: if value is not boolean
  """
  if value is None:
    return
  accepted_strings = _TRUE_STRINGS + _FALSE_STRINGS
  if Stringize(value).lower() not in accepted_strings:
    raise InvalidValueError(
        'The [{0}] value [{1}] is not valid. Possible values: [{2}].'.format(
            property_name, value,
            ', '.join([x if x else "''" for x in accepted_strings])))


def _VerbosityValidator(value):
  if value is None:
    return
  if Stringize(value).lower() not in _VERBOSITY_NAMES:
    raise InvalidValueError(
        'The [verbosity] value [{0}] is not valid. Possible values: [{1}].'
        .format(value, ', '.join(_VERBOSITY_NAMES)))


def _EndpointValidator(value):
  if value is None:
    return
  if not _VALID_ENDPOINT_OVERRIDE_REGEX.match(value):
    raise InvalidValueError(
        'The endpoint_overrides property must be an absolute URI beginning '
        'with http:// or https:// and ending with a trailing \'/\'. '
        '[{value}] is not a valid endpoint override.'
        .format(value=value))


class Error(exceptions.Error):
  """Exceptions for the properties module."""


class InvalidValueError(Error):
  """Raised when a property is given a value its validator rejects."""


class _Sections(object):
  """The property sections known to gcecloud.

  Attributes:
    api_endpoint_overrides: _SectionApiEndpointOverrides, Root URLs that
      replace the default API endpoints.
    core: _SectionCore, Logging properties.
  """

  def __init__(self):
    self.api_endpoint_overrides = _SectionApiEndpointOverrides()
    self.core = _SectionCore()


class _Section(object):
  """A named group of properties sharing an environment variable prefix."""

  def __init__(self, name):
    self.name = name

  def _Add(self, name, callbacks=None, default=None, validator=None):
    return _Property(self.name, name, callbacks=callbacks, default=default,
                     validator=validator)

  def _AddBool(self, name, callbacks=None, default=None):
    return self._Add(name, callbacks=callbacks, default=default,
                     validator=functools.partial(_BooleanValidator, name))


class _SectionApiEndpointOverrides(_Section):
  """Root URLs, e.g. https://compute.example.com/, to use for an API."""

  def __init__(self):
    super(_SectionApiEndpointOverrides, self).__init__(
        'api_endpoint_overrides')
    self.compute = self._Add('compute', validator=_EndpointValidator)


class _SectionCore(_Section):
  """Contains the properties for the 'core' section."""

  def __init__(self):
    super(_SectionCore, self).__init__('core')
    self.verbosity = self._Add('verbosity', validator=_VerbosityValidator)
    self.disable_color = self._AddBool('disable_color')


class _Property(object):
  """A property backed by an environment variable.

  A value is looked up in the environment first, then by calling each
  callback in order until one returns something other than None, and finally
  taken from the default.
  """

  def __init__(self, section, name, callbacks=None, default=None,
               validator=None):
    self.section = section
    self.name = name
    self.default = default
    self.__callbacks = list(callbacks or [])
    self.__validator = validator

  def Get(self, validate=True):
    """Gets the value for this property.

    Args:
      validate: bool, Whether or not to run the fetched value through the
          validation function.

    Returns:
      str, The value for this property, or None if it is not set anywhere.

    Raises:
      InvalidValueError: If validate is True and the value is invalid.
    """
    value = os.environ.get(self.EnvironmentName())
    if value is None:
      for callback in self.__callbacks:
        value = callback()
        if value is not None:
          break
    if value is None:
      value = self.default
    if validate:
      self.Validate(value)
    return value

  def GetBool(self, validate=False):
    """Gets the boolean value for this property, or None if it is not set."""
    value = self.Get(validate=validate)
    if value is None:
      return None
    return Stringize(value).lower() in _TRUE_STRINGS

  def Validate(self, value):
    """Raises InvalidValueError if the validator rejects value."""
    if self.__validator:
      self.__validator(value)

  def Set(self, value):
    """Sets the value for this property as an environment variable.

    Args:
      value: str/bool, The proposed value for this property. If None, the
        variable is removed from the environment.

    Raises:
      InvalidValueError: If the value is invalid.
    """
    self.Validate(value)
    if value is None:
      os.environ.pop(self.EnvironmentName(), None)
    else:
      os.environ[self.EnvironmentName()] = Stringize(value)

  def AddCallback(self, callback):
    self.__callbacks.append(callback)

  def RemoveCallback(self, callback):
    self.__callbacks.remove(callback)

  def EnvironmentName(self):
    return 'CLOUDSDK_{0}_{1}'.format(self.section.upper(), self.name.upper())


VALUES = _Sections()
