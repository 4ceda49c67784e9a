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

"""Copy API messages between version-specific message types."""

from apitools.base.protorpclite import messages
from apitools.base.py import encoding

from gcecloud.core import exceptions


class CopyError(exceptions.Error):
  """A message could not be copied.

  Attributes:
    phase: str, 'serialize' or 'deserialize'.
    cause: Exception, The error raised by that phase.
  """

  phase = None

  def __init__(self, message_type, cause):
    super(CopyError, self).__init__(
        'failed to {0} [{1}]: {2}'.format(
            self.phase, message_type.__name__, cause))
    self.cause = cause


class SerializationError(CopyError):
  """The source message could not be encoded to JSON."""

  phase = 'serialize'


class DeserializationError(CopyError):
  """The encoded source could not be decoded into the destination type."""

  phase = 'deserialize'


def _UnrecognizedDeclaredFields(message, prefix=''):
  """Returns the paths of declared fields whose value could not be decoded.

  apitools keeps enum values the message's enum does not define as
  unrecognized fields instead of failing, including in nested messages.

  Args:
    message: messages.Message, The decoded message.
    prefix: str, The path of message within the top-level message.

  Returns:
    [str], Dotted field paths, e.g. ['accessConfigs.type'].
  """
  declared = {field.name: field for field in message.all_fields()}
  paths = [prefix + name for name in message.all_unrecognized_fields()
           if name in declared]
  for field in declared.values():
    if not isinstance(field, messages.MessageField):
      continue
    value = message.get_assigned_value(field.name)
    if value is None:
      continue
    for item in (value if field.repeated else [value]):
      # DateTimeField values are datetimes.
      if not isinstance(item, messages.Message):
        continue
      paths.extend(_UnrecognizedDeclaredFields(
          item, prefix + field.name + '.'))
  return paths


def CopyViaJson(dest, src):
  """Populates dest from the fields of src that share a name with dest's.

  src is encoded with apitools' JSON encoding and decoded as type(dest), so
  the two may be unrelated message classes, e.g. the v1 and alpha versions of
  the same resource. Fields only src has are dropped. Fields of dest that src
  leaves unset keep their value.

  Args:
    dest: apitools.base.protorpclite.messages.Message, The message to
      populate. It is modified in place.
    src: apitools.base.protorpclite.messages.Message, The message to copy.

  Returns:
    The populated dest.

  Raises:
    SerializationError: If src cannot be encoded.
    DeserializationError: If the encoding of src cannot be decoded as
      type(dest), including enum values that type(dest) does not define.
  """
  try:
    json_value = encoding.MessageToJson(src)
  except Exception as e:  # pylint: disable=broad-except
    raise SerializationError(type(src), e) from e

  try:
    decoded = encoding.JsonToMessage(type(dest), json_value)
  except Exception as e:  # pylint: disable=broad-except
    raise DeserializationError(type(dest), e) from e

  undecoded = _UnrecognizedDeclaredFields(decoded)
  if undecoded:
    raise DeserializationError(type(dest), messages.DecodeError(
        'invalid values for fields [{0}]'.format(', '.join(undecoded))))

  for field in decoded.all_fields():
    value = decoded.get_assigned_value(field.name)
    if value is not None:
      setattr(dest, field.name, value)
  return dest
