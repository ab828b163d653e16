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

"""Derivation rules and profiles

A rule describes one downstream collaborator as a table of fields. Every
field takes its value either from exactly one input parameter, from a
documented constant, or from several parameters combined by a named
transform, so each derived attribute can be traced back to its inputs.
"""

import logging

from privatecloud import consts
from privatecloud import declarations
from privatecloud.errors import errors
from privatecloud import parameters


log = logging.getLogger(__name__)


class Field(object):

    sources = ()

    def value(self, params):
        raise NotImplementedError('Should be implemented by field type.')

    def describe(self):
        raise NotImplementedError('Should be implemented by field type.')


class Param(Field):
    """Value copied from a single input parameter."""

    def __init__(self, key):
        self.key = key
        self.sources = (key,)

    def value(self, params):
        return params[self.key]

    def describe(self):
        return 'copy'


class Fixed(Field):
    """Constant emitted whatever the input is."""

    def __init__(self, constant):
        self.constant = constant

    def value(self, params):
        return self.constant

    def describe(self):
        return 'constant {0!r}'.format(self.constant)


class Compose(Field):
    """Several parameters combined by ``transform``

    The result is a secret as soon as one of the inputs is.
    """

    def __init__(self, keys, transform):
        self.sources = tuple(keys)
        self.transform = transform

    def value(self, params):
        args = [params[key] for key in self.sources]
        result = self.transform(*args)
        if any(parameters.is_secret(arg) for arg in args):
            return parameters.SecretString(result)
        return result

    def describe(self):
        return self.transform.__name__


class DerivationRule(object):
    """Maps a parameter set to the declaration of one collaborator.

    :param target: name of the downstream class or resource title
    :param fields: sequence of (attribute, Field) pairs, in output order
    :param kind: declaration kind, a Puppet class by default
    :param enabled_by: name of a boolean parameter gating the rule
    :param platforms: platform tags the rule applies to, all when None
    """

    def __init__(self, target, fields=(), kind=consts.DECLARATION_KINDS.klass,
                 enabled_by=None, platforms=None):
        self.target = target
        self.fields = tuple(fields)
        self.kind = kind
        self.enabled_by = enabled_by
        self.platforms = platforms

    @property
    def required(self):
        keys = []
        if self.enabled_by:
            keys.append(self.enabled_by)
        for _, field in self.fields:
            for key in field.sources:
                if key not in keys:
                    keys.append(key)
        return keys

    def applies_to(self, platform):
        return self.platforms is None or platform.tag in self.platforms

    def enabled(self, params):
        if self.enabled_by is None:
            return True
        if self.enabled_by not in params:
            raise errors.MissingKeyError(self.enabled_by, log_message=True)
        return bool(params[self.enabled_by])

    def derive(self, params, platform=None):
        """Build the declaration

        Every source is checked before any attribute is computed, so a
        partially populated declaration is never returned.

        :param params: a validated ParameterSet
        :param platform: resolved PlatformProfile; derived values never
            depend on it, platform filtering happens in Profile.rules_for
        :raises MissingKeyError:
        """
        missing = params.missing(self.required)
        if missing is not None:
            raise errors.MissingKeyError(missing, log_message=True)

        attributes = [(key, field.value(params)) for key, field in self.fields]
        return declarations.TargetDeclaration(
            self.target, attributes, kind=self.kind)

    def trace(self):
        return [(self.target, key, field.sources, field.describe())
                for key, field in self.fields]

    def __repr__(self):
        return '<DerivationRule {0}[{1}]>'.format(self.kind, self.target)


class Profile(object):
    """A top level class: parameter schema plus an ordered set of rules.

    Rules of included profiles come first, in inclusion order, followed by
    the profile's own rules. Schemas are merged the same way.
    """

    def __init__(self, name, schema, rules, includes=(), services=(),
                 description=''):
        self.name = name
        self.own_schema = schema
        self.own_rules = tuple(rules)
        self.includes = tuple(includes)
        self.own_services = tuple(services)
        self.description = description

    @property
    def schema(self):
        schema = parameters.Schema()
        for included in self.includes:
            schema = schema.merge(included.schema)
        return schema.merge(self.own_schema)

    @property
    def rules(self):
        rules = []
        for included in self.includes:
            rules.extend(included.rules)
        rules.extend(self.own_rules)
        return rules

    @property
    def services(self):
        services = []
        for included in self.includes:
            services.extend(s for s in included.services
                            if s not in services)
        services.extend(s for s in self.own_services if s not in services)
        return services

    def rules_for(self, platform):
        return [rule for rule in self.rules if rule.applies_to(platform)]

    def __repr__(self):
        return '<Profile {0}>'.format(self.name)
