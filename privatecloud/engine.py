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

"""Derivation entry points"""

import logging

from privatecloud import parameters
from privatecloud import platform as platforms
from privatecloud import rules


log = logging.getLogger(__name__)


def derive(profile, params, platform=None):
    """Derive the declarations of a profile

    The whole run aborts on the first error; nothing is returned for a
    configuration that doesn't validate.

    :param profile: profile name or Profile instance
    :param params: mapping of raw parameter values
    :param platform: platform tag, PlatformProfile, or None for the default
    :returns: tuple of TargetDeclaration in rule order
    :raises ValidationException: on a missing or malformed parameter
    :raises ProfileException: on an unknown profile or platform
    """
    profile = rules.get_profile(profile)
    platform = platforms.resolve_platform(platform)
    validated = parameters.validate(params, profile.schema)

    log.debug("Deriving %s for platform %s", profile.name, platform.tag)
    result = []
    for rule in profile.rules_for(platform):
        if not rule.enabled(validated):
            log.debug("Rule %r is disabled by '%s'", rule, rule.enabled_by)
            continue
        result.append(rule.derive(validated, platform))

    log.info("Derived %d declarations for %s", len(result), profile.name)
    return tuple(result)


def trace(profile):
    """Where every derived attribute of a profile comes from

    :returns: list of (target, attribute, sources, transform) tuples
    """
    profile = rules.get_profile(profile)
    result = []
    for rule in profile.rules:
        result.extend(rule.trace())
    return result


def packages(profile, platform=None):
    """Package and service names of a profile on a platform

    :returns: dict service -> {'packages': [...], 'services': [...]}
    """
    profile = rules.get_profile(profile)
    platform = platforms.resolve_platform(platform)
    return dict(
        (service, {
            'packages': list(platform.package_names.get(service, ())),
            'services': list(platform.service_names.get(service, ())),
        })
        for service in profile.services)


def apply(declarations, backend):
    """Hand derived declarations over to a provisioning backend

    :raises ApplyError: when the backend fails
    """
    log.info("Applying %d declarations with %s",
             len(declarations), backend.__class__.__name__)
    return backend.apply_all(declarations)
