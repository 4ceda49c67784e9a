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

"""Parse and build Compute Engine resource URLs.

ParseResourceURL() turns a self link, or a relative path starting at
projects/, into a ResourceID. SelfLink() goes the other way. The two
round-trip for every project, resource and key, whatever the API version:

  >>> ref = ParseResourceURL(
  ...     'https://www.googleapis.com/compute/v1/projects/p/zones/z/disks/d')
  >>> ref
  ResourceID(project='p', resource='disks', key=ZonalKey(name='d', zone='z'))
  >>> ref.SelfLink(meta.Version.ALPHA)
  'https://www.googleapis.com/compute/alpha/projects/p/zones/z/disks/d'
"""

import dataclasses
import re
from typing import Optional

from gcecloud.api_lib.compute import meta
from gcecloud.core import exceptions
from gcecloud.core import log
from gcecloud.core import properties

DEFAULT_ROOT_URL = 'https://www.googleapis.com/'
_API_PATH = 'compute/{version}/'

# The scheme, host and API name are dropped; the version must be one segment.
_URL_RE = re.compile(
    r'^https?://[^/]+/compute/(?P<version>[^/]+)/(?P<path>.*)$')
_WHITESPACE_RE = re.compile(r'\s')

_PROJECTS = 'projects'
_GLOBAL = 'global'
_REGIONS = 'regions'
_ZONES = 'zones'


class Error(exceptions.Error):
  """Exceptions for this module."""


class MalformedResourceUrlError(Error):
  """A resource URL or path could not be parsed."""

  def __init__(self, url):
    super(MalformedResourceUrlError, self).__init__(
        '[{0}] is not a valid resource URL'.format(url))
    self.url = url


@dataclasses.dataclass(frozen=True)
class ResourceID:
  """Identifies a Compute Engine resource.

  Attributes:
    project: The project owning the resource.
    resource: The resource collection, e.g. 'instances'. 'projects' for the
      project itself, 'regions' or 'zones' for a region or zone.
    key: The resource key, or None for the project itself.
  """

  project: str
  resource: str
  key: Optional[meta.Key]

  def RelativeResourceName(self):
    return RelativeResourceName(self.project, self.resource, self.key)

  def ResourcePath(self):
    return ResourcePath(self.resource, self.key)

  def SelfLink(self, version, base_url=None):
    return SelfLink(version, self.project, self.resource, self.key,
                    base_url=base_url)


def ParseResourceURL(url):
  """Parses a resource URL or relative path into a ResourceID.

  Accepted spellings are a full URL,
  https://www.googleapis.com/compute/v1/projects/p/zones/z/instances/i, or the
  path that starts at projects/, projects/p/zones/z/instances/i. The API
  version in a full URL is ignored; versions that are not known are accepted.

  Args:
    url: str, The URL or path to parse.

  Returns:
    ResourceID, The parsed identifier.

  Raises:
    MalformedResourceUrlError: If url contains whitespace, or does not name a
      project, a region or zone, or a global, regional or zonal resource.
  """
  if _WHITESPACE_RE.search(url):
    raise MalformedResourceUrlError(url)

  path = url
  match = _URL_RE.match(url)
  if match:
    version = match.group('version')
    if meta.Version.FromApiVersion(version) is None:
      log.debug('Ignoring unknown compute API version [%s] in [%s].',
                version, url)
    path = match.group('path')

  parts = path.split('/')
  if '' in parts or len(parts) < 2 or parts[0] != _PROJECTS:
    raise MalformedResourceUrlError(url)

  project, parts = parts[1], parts[2:]
  if not parts:
    return ResourceID(project, _PROJECTS, None)

  scope = parts[0]
  if scope == _GLOBAL:
    if len(parts) != 3:
      raise MalformedResourceUrlError(url)
    return ResourceID(project, parts[1], meta.GlobalKey(parts[2]))

  if scope not in (_REGIONS, _ZONES):
    raise MalformedResourceUrlError(url)

  if len(parts) == 2:
    # The region or zone itself.
    return ResourceID(project, scope, meta.GlobalKey(parts[1]))

  if len(parts) != 4:
    raise MalformedResourceUrlError(url)

  _, location, resource, name = parts
  if scope == _REGIONS:
    return ResourceID(project, resource, meta.RegionalKey(name, location))
  return ResourceID(project, resource, meta.ZonalKey(name, location))


def ResourcePath(resource, key):
  """Returns the path of a resource relative to its project.

  Args:
    resource: str, The resource collection, e.g. 'addresses'.
    key: meta.Key, The resource key, or None for the project itself.

  Returns:
    str, e.g. 'regions/us-central1/addresses/my-address', or '' if key is None.
  """
  if key is None:
    return ''
  key_type = key.Type()
  if key_type is meta.KeyType.ZONAL:
    return '{0}/{1}/{2}/{3}'.format(_ZONES, key.zone, resource, key.name)
  if key_type is meta.KeyType.REGIONAL:
    return '{0}/{1}/{2}/{3}'.format(_REGIONS, key.region, resource, key.name)
  if resource in (_REGIONS, _ZONES):
    return '{0}/{1}'.format(resource, key.name)
  return '{0}/{1}/{2}'.format(_GLOBAL, resource, key.name)


def RelativeResourceName(project, resource, key):
  """Returns the resource name relative to the API root, e.g. projects/p/..."""
  path = ResourcePath(resource, key)
  if not path:
    return '{0}/{1}'.format(_PROJECTS, project)
  return '{0}/{1}/{2}'.format(_PROJECTS, project, path)


def SelfLink(version, project, resource, key, base_url=None):
  """Returns the self link of a resource.

  Args:
    version: meta.Version, The API version to link to.
    project: str, The project owning the resource.
    resource: str, The resource collection, e.g. 'addresses'.
    key: meta.Key, The resource key, or None for the project itself.
    base_url: str, Replaces https://www.googleapis.com/compute/<version>/ if
      given. Must end with a '/'.

  Returns:
    str, The URL of the resource.
  """
  if base_url is None:
    base_url = DEFAULT_ROOT_URL + _API_PATH.format(version=version.api_version)
  return base_url + RelativeResourceName(project, resource, key)


def GetApiBaseUrl(version):
  """Returns the effective compute API base URL for version.

  The api_endpoint_overrides/compute property, when set, replaces the
  https://www.googleapis.com/ root.

  Args:
    version: meta.Version, The API version.

  Returns:
    str, e.g. https://www.googleapis.com/compute/beta/
  """
  root = properties.VALUES.api_endpoint_overrides.compute.Get()
  return (root or DEFAULT_ROOT_URL) + _API_PATH.format(
      version=version.api_version)


def AggregatedListKey(key):
  """Returns the scope key of an aggregatedList response holding key.

  Args:
    key: meta.Key, The resource key.

  Returns:
    str, 'global', 'regions/<region>' or 'zones/<zone>'.
  """
  key_type = key.Type()
  if key_type is meta.KeyType.ZONAL:
    return '{0}/{1}'.format(_ZONES, key.zone)
  if key_type is meta.KeyType.REGIONAL:
    return '{0}/{1}'.format(_REGIONS, key.region)
  return _GLOBAL
