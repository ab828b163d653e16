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

import types

import yaml

from privatecloud import consts
from privatecloud import parameters


def plain(value, mask_secrets=False):
    """Convert a derived value into plain yaml/json friendly data."""
    if parameters.is_secret(value):
        return consts.SECRET_MASK if mask_secrets else str(value)
    if isinstance(value, (list, tuple)):
        return [plain(v, mask_secrets) for v in value]
    return value


class TargetDeclaration(object):
    """What a downstream collaborator should receive.

    A declaration is either a class (``kind`` is ``class``, ``name`` is the
    class name, e.g. ``glance::api``) or a resource of another type
    (``kind`` is e.g. ``ceilometer_config``, ``name`` is its title).
    Attributes keep the order in which the rule produced them.
    """

    __slots__ = ('_kind', '_name', '_attributes')

    def __init__(self, name, attributes=None,
                 kind=consts.DECLARATION_KINDS.klass):
        self._kind = kind
        self._name = name
        self._attributes = types.MappingProxyType(dict(attributes or ()))

    @property
    def kind(self):
        return self._kind

    @property
    def name(self):
        return self._name

    @property
    def attributes(self):
        return self._attributes

    @property
    def is_class(self):
        return self._kind == consts.DECLARATION_KINDS.klass

    @property
    def reference(self):
        """Puppet style reference, e.g. Class['glance::api']"""
        return "{0}['{1}']".format(self._kind.capitalize(), self._name)

    def __getitem__(self, key):
        return self._attributes[key]

    def __eq__(self, other):
        if not isinstance(other, TargetDeclaration):
            return NotImplemented
        return (self._kind, self._name, list(self._attributes.items())) == \
            (other._kind, other._name, list(other._attributes.items()))

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self._kind, self._name))

    def __repr__(self):
        return '<TargetDeclaration {0}>'.format(self.reference)

    def to_dict(self, mask_secrets=False):
        return {
            'kind': self._kind,
            'name': self._name,
            'attributes': dict(
                (k, plain(v, mask_secrets))
                for k, v in self._attributes.items()),
        }


def dump(declarations, mask_secrets=False):
    """Canonical yaml form of a sequence of declarations

    Same declarations always dump to the same text.
    """
    return yaml.safe_dump(
        [d.to_dict(mask_secrets) for d in declarations],
        default_flow_style=False)
