# -*- coding: utf-8 -*-

#    Copyright 2014 Mirantis, Inc.
#
#    Licensed under the Apache License, Version 2.0 (the "License"); you may
#    not use this file except in compliance with the License. You may obtain
#    a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
#    WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
#    License for the specific language governing permissions and limitations
#    under the License.

"""Typed parameter declarations and their validation"""

import collections.abc
import logging

import jsonschema

from privatecloud import consts
from privatecloud.errors import errors


log = logging.getLogger(__name__)


TYPE_SCHEMAS = {
    consts.PARAMETER_TYPES.string: {'type': 'string'},
    consts.PARAMETER_TYPES.boolean: {'type': 'boolean'},
    consts.PARAMETER_TYPES.list: {
        'type': 'array',
        'items': {'type': 'string'}
    },
    consts.PARAMETER_TYPES.secret: {'type': 'string'},
    # numeric strings are bounded by the pattern, integers by min/max
    consts.PARAMETER_TYPES.port: {
        'oneOf': [
            {
                'type': 'string',
                'pattern': ('^([1-9][0-9]{0,3}|[1-5][0-9]{4}|6[0-4][0-9]{3}'
                            '|65[0-4][0-9]{2}|655[0-2][0-9]|6553[0-5])$')
            },
            {
                'type': 'integer',
                'minimum': 1,
                'maximum': 65535
            },
        ]
    },
}

PYTHON_TYPE_NAMES = (
    (bool, 'boolean'),
    (str, 'string'),
    (int, 'integer'),
    (float, 'number'),
    (list, 'list'),
    (tuple, 'list'),
    (dict, 'mapping'),
    (type(None), 'null'),
)


def type_name(value):
    for python_type, name in PYTHON_TYPE_NAMES:
        if isinstance(value, python_type):
            return name
    return type(value).__name__


class SecretString(str):
    """A string which doesn't show its value in reprs and logs."""

    def __repr__(self):
        return "'{0}'".format(consts.SECRET_MASK)


def is_secret(value):
    return isinstance(value, SecretString)


def mask(value):
    if is_secret(value):
        return consts.SECRET_MASK
    return value


class Parameter(object):
    """Declaration of a single input parameter.

    :param name: parameter name as it appears in the configuration
    :param type: one of consts.PARAMETER_TYPES
    :param required: missing required parameters fail the validation
    :param default: value used when an optional parameter is absent
    :param choices: optional list of allowed values
    :param description: free text shown by the cli
    """

    def __init__(self, name, type=consts.PARAMETER_TYPES.string,
                 required=True, default=None, choices=None, description=''):
        if type not in consts.PARAMETER_TYPES:
            raise ValueError("Unknown parameter type {0}".format(type))
        self.name = name
        self.type = type
        self.required = required
        self.default = default
        self.choices = choices
        self.description = description

    @property
    def schema(self):
        schema = dict(TYPE_SCHEMAS[self.type])
        if self.choices:
            schema['enum'] = list(self.choices)
        return schema

    @property
    def secret(self):
        return self.type == consts.PARAMETER_TYPES.secret

    def check(self, value):
        validator = jsonschema.Draft4Validator(self.schema)
        if not validator.is_valid(value):
            raise errors.ParameterTypeError(
                self.name, self.type, type_name(value), log_message=True)

    def convert(self, value):
        if self.secret:
            return SecretString(value)
        if isinstance(value, list):
            return tuple(value)
        return value

    def __repr__(self):
        return '<Parameter {0} ({1}{2})>'.format(
            self.name, self.type, '' if self.required else ', optional')


class Schema(object):
    """Ordered collection of parameter declarations."""

    def __init__(self, *parameters):
        self._parameters = collections.OrderedDict()
        for parameter in parameters:
            self._parameters[parameter.name] = parameter

    def __iter__(self):
        return iter(self._parameters.values())

    def __len__(self):
        return len(self._parameters)

    def __contains__(self, name):
        return name in self._parameters

    def get(self, name):
        return self._parameters.get(name)

    @property
    def required(self):
        return [p for p in self if p.required]

    @property
    def optional(self):
        return [p for p in self if not p.required]

    def merge(self, other):
        """New schema holding both sets; ``other`` wins on name clashes."""
        return Schema(*(list(self) + list(other)))


class ParameterSet(collections.abc.Mapping):
    """Read-only mapping of validated parameter values."""

    def __init__(self, values):
        self._values = dict(values)

    def __getitem__(self, key):
        return self._values[key]

    def __iter__(self):
        return iter(sorted(self._values))

    def __len__(self):
        return len(self._values)

    def __repr__(self):
        return 'ParameterSet({0})'.format(
            ', '.join('{0}={1!r}'.format(k, self[k]) for k in self))

    def missing(self, keys):
        """First of ``keys`` absent from the set, or None."""
        for key in keys:
            if key not in self._values:
                return key
        return None


def validate(params, schema):
    """Validate raw configuration against a schema

    Required parameters are checked in declaration order, then the type of
    every declared parameter is checked. Nothing is coerced.

    :param params: a mapping of raw parameter values
    :param schema: a Schema instance
    :returns: ParameterSet with defaults filled in for absent optionals
    :raises MissingKeyError: for the first absent required parameter
    :raises ParameterTypeError: for the first value of a wrong type
    """
    if not isinstance(params, collections.abc.Mapping):
        raise errors.InvalidData(
            "Parameters should be a mapping, got {0}".format(
                type_name(params)))

    for parameter in schema.required:
        if parameter.name not in params:
            raise errors.MissingKeyError(parameter.name, log_message=True)

    values = {}
    for parameter in schema:
        if parameter.name in params:
            value = params[parameter.name]
            parameter.check(value)
        elif parameter.default is not None:
            value = parameter.default
        else:
            continue
        values[parameter.name] = parameter.convert(value)

    for key in sorted(set(params) - set(values)):
        log.debug("Ignoring undeclared parameter '%s'", key)

    return ParameterSet(values)
