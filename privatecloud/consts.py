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

from collections import namedtuple


def Enum(*values, **kwargs):
    names = kwargs.get('names')
    if names:
        return namedtuple('Enum', names)(*values)
    return namedtuple('Enum', values)(*values)


PLATFORMS = Enum(
    'debian',
    'redhat'
)

OSFAMILIES = Enum(
    'Debian',
    'RedHat',
    names=(
        'debian',
        'redhat'
    )
)

PARAMETER_TYPES = Enum(
    'string',
    'boolean',
    'list',
    'secret',
    'port'
)

DECLARATION_KINDS = Enum(
    'class',
    'ceilometer_config',
    names=(
        'klass',
        'ceilometer_config'
    )
)

OUTPUT_FORMATS = Enum(
    'yaml',
    'json',
    'manifest'
)

# Values every profile hands to the downstream classes unconditionally.
SERVICES_TENANT = 'services'
SYSLOG_FACILITY = 'LOG_LOCAL0'
USE_SYSLOG = True
KEYSTONE_API_VERSION = 'v2.0'
DATABASE_SCHEME = 'mysql'
AUTH_PROTOCOLS = ('http', 'https')

SECRET_MASK = '******'

# Puppet --detailed-exitcodes: 0 no changes, 2 changes applied
PUPPET_SUCCESS_CODES = (0, 2)

EXIT_CODES = Enum(
    0,
    2,
    3,
    names=(
        'success',
        'invalid',
        'apply_failed'
    )
)
