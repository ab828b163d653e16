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

"""Platform (OS family) naming resolution

Platforms only differ in how packages and services are named. Derived
values never depend on the platform.
"""

from collections import namedtuple
import logging
import types

from privatecloud import consts
from privatecloud.errors import errors
from privatecloud.settings import settings


log = logging.getLogger(__name__)


PlatformProfile = namedtuple(
    'PlatformProfile', ['tag', 'package_names', 'service_names'])


PLATFORM_NAMING = {
    consts.PLATFORMS.debian: {
        'packages': {
            'glance': ('glance-api', 'glance-registry'),
            'ceilometer': ('ceilometer-common', 'ceilometer-api',
                           'ceilometer-collector', 'ceilometer-agent-central'),
            'nova': ('nova-scheduler',),
        },
        'services': {
            'glance': ('glance-api', 'glance-registry'),
            'ceilometer': ('ceilometer-api', 'ceilometer-collector',
                           'ceilometer-agent-central'),
            'nova': ('nova-scheduler',),
        },
    },
    consts.PLATFORMS.redhat: {
        'packages': {
            'glance': ('openstack-glance',),
            'ceilometer': ('openstack-ceilometer-common',
                           'openstack-ceilometer-api',
                           'openstack-ceilometer-collector',
                           'openstack-ceilometer-central'),
            'nova': ('openstack-nova-scheduler',),
        },
        'services': {
            'glance': ('openstack-glance-api', 'openstack-glance-registry'),
            'ceilometer': ('openstack-ceilometer-api',
                           'openstack-ceilometer-collector',
                           'openstack-ceilometer-central'),
            'nova': ('openstack-nova-scheduler',),
        },
    },
}


def resolve_platform(tag=None):
    """Resolve a platform tag into its naming profile

    :param tag: a platform tag, a PlatformProfile (returned as is) or None
        for the configured default platform
    :returns: PlatformProfile
    :raises UnknownPlatform:
    """
    if isinstance(tag, PlatformProfile):
        return tag
    if tag is None:
        tag = settings.DEFAULT_PLATFORM or consts.PLATFORMS.debian

    naming = PLATFORM_NAMING.get(str(tag).lower())
    if naming is None:
        raise errors.UnknownPlatform(
            "Unknown platform '{0}', expected one of: {1}".format(
                tag, ', '.join(consts.PLATFORMS)))

    return PlatformProfile(
        tag=str(tag).lower(),
        package_names=types.MappingProxyType(naming['packages']),
        service_names=types.MappingProxyType(naming['services']))


def resolve_from_facts(facts):
    """Resolve a platform from node facts carrying ``osfamily``."""
    osfamily = facts.get('osfamily')
    for tag, family in zip(consts.OSFAMILIES._fields, consts.OSFAMILIES):
        if osfamily == family:
            log.debug("osfamily %s resolved to platform %s", osfamily, tag)
            return resolve_platform(tag)
    raise errors.UnknownPlatform(
        "Unsupported osfamily '{0}'".format(osfamily))
