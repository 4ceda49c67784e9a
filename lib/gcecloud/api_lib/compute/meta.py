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

"""API versions and resource keys for Compute Engine resources.

A key names a resource within its addressing scope:

  GlobalKey('my-url-map')                       global resources, and the
                                                regions/zones themselves
  RegionalKey('my-address', 'us-central1')      resources under a region
  ZonalKey('instance-1', 'us-central1-b')       resources under a zone

Project-level identifiers have no key at all; resource_id.ResourceID stores
None for them.
"""

import abc
import dataclasses
import enum
import re

from gcecloud.core import exceptions

_LOCATION_RE = re.compile(r'^[a-z](?:[-a-z0-9]+)?$')


class InvalidKeyError(exceptions.Error):
  """Raised when a key is built with a missing name or location."""


class Version(enum.Enum):
  """Compute API versions and the token each uses in resource URLs."""

  GA = ('ga', 'v1')
  BETA = ('beta', 'beta')
  ALPHA = ('alpha', 'alpha')

  # pylint: disable=redefined-builtin
  def __init__(self, id, api_version):
    self.id = id
    self.api_version = api_version

  def __str__(self):
    return self.id

  @classmethod
  def FromApiVersion(cls, api_version):
    """Returns the Version using api_version in URLs, or None if unknown."""
    for version in cls:
      if version.api_version == api_version:
        return version
    return None


ALL_VERSIONS = [Version.GA, Version.BETA, Version.ALPHA]


class KeyType(enum.Enum):
  ZONAL = 'zonal'
  REGIONAL = 'regional'
  GLOBAL = 'global'


@dataclasses.dataclass(frozen=True)
class Key(abc.ABC):
  """Abstract base class of GlobalKey, RegionalKey and ZonalKey.

  Attributes:
    name: The name of the resource.
  """

  name: str

  def __post_init__(self):
    for field in dataclasses.fields(self):
      value = getattr(self, field.name)
      if not isinstance(value, str) or not value:
        raise InvalidKeyError(
            '{0} requires a non-empty {1}, got [{2!r}]'.format(
                type(self).__name__, field.name, value))

  @abc.abstractmethod
  def Type(self):
    """Returns the KeyType of this key."""

  def Valid(self):
    """Returns True if the key's location looks like a GCE region or zone."""
    return True


@dataclasses.dataclass(frozen=True)
class GlobalKey(Key):
  """Key of a global resource, or of a region or zone itself."""

  def Type(self):
    return KeyType.GLOBAL

  def __str__(self):
    return 'Key({0!r})'.format(self.name)


@dataclasses.dataclass(frozen=True)
class RegionalKey(Key):
  """Key of a resource scoped to a region.

  Attributes:
    region: The region containing the resource.
  """

  region: str

  def Type(self):
    return KeyType.REGIONAL

  def Valid(self):
    return bool(_LOCATION_RE.match(self.region))

  def __str__(self):
    return 'Key({0!r}, region={1!r})'.format(self.name, self.region)


@dataclasses.dataclass(frozen=True)
class ZonalKey(Key):
  """Key of a resource scoped to a zone.

  Attributes:
    zone: The zone containing the resource.
  """

  zone: str

  def Type(self):
    return KeyType.ZONAL

  def Valid(self):
    return bool(_LOCATION_RE.match(self.zone))

  def __str__(self):
    return 'Key({0!r}, zone={1!r})'.format(self.name, self.zone)
