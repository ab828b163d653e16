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

"""Telemetry (Ceilometer) profiles

``privatecloud::telemetry`` holds what every ceilometer node shares;
``privatecloud::telemetry::server`` includes it and adds the API node.
"""

from privatecloud import consts
from privatecloud.parameters import Parameter
from privatecloud.parameters import Schema
from privatecloud.rules.base import Compose
from privatecloud.rules.base import DerivationRule
from privatecloud.rules.base import Fixed
from privatecloud.rules.base import Param
from privatecloud.rules.base import Profile
from privatecloud import utils


SERVICE_USER = 'ceilometer'

T = consts.PARAMETER_TYPES
CONFIG = consts.DECLARATION_KINDS.ceilometer_config


COMMON_SCHEMA = Schema(
    Parameter('ceilometer_secret', T.secret,
              description='Secret used to sign metering messages'),
    Parameter('rabbit_hosts', T.list),
    Parameter('rabbit_password', T.secret),
    Parameter('ks_keystone_internal_host'),
    Parameter('ks_keystone_internal_port', T.port),
    Parameter('ks_keystone_internal_proto', required=False, default='http',
              choices=consts.AUTH_PROTOCOLS),
    Parameter('verbose', T.boolean, required=False, default=False),
    Parameter('debug', T.boolean, required=False, default=False),
)

SERVER_SCHEMA = Schema(
    Parameter('ks_nova_password', T.secret,
              description='Password of the service account in keystone'),
    Parameter('api_eth', description='Address the API service binds to'),
    Parameter('neutron_metadata_proxy_shared_secret', T.secret),
)


COMMON = DerivationRule('ceilometer', (
    ('verbose', Param('verbose')),
    ('debug', Param('debug')),
    ('rabbit_userid', Fixed(SERVICE_USER)),
    ('rabbit_hosts', Param('rabbit_hosts')),
    ('rabbit_password', Param('rabbit_password')),
    ('metering_secret', Param('ceilometer_secret')),
))

SYSLOG_FACILITY = DerivationRule(
    'DEFAULT/syslog_log_facility',
    (('value', Fixed(consts.SYSLOG_FACILITY)),),
    kind=CONFIG)

# NOTE: the option name is the one the deployed manifests write
USE_SYSLOG = DerivationRule(
    'DEFAULT/user_syslog',
    (('value', Fixed('yes')),),
    kind=CONFIG)

AGENT_AUTH = DerivationRule('ceilometer::agent::auth', (
    ('auth_password', Param('ks_nova_password')),
    ('auth_url', Compose(
        ('ks_keystone_internal_host', 'ks_keystone_internal_port',
         'ks_keystone_internal_proto'),
        utils.build_auth_url)),
))

SCHEDULER = DerivationRule('nova::scheduler', (
    ('enabled', Fixed(True)),
))

API = DerivationRule('ceilometer::api', (
    ('auth_host', Param('ks_keystone_internal_host')),
    ('admin_password', Param('ks_nova_password')),
    ('api_bind_address', Param('api_eth')),
    ('neutron_metadata_proxy_shared_secret',
     Param('neutron_metadata_proxy_shared_secret')),
))


TELEMETRY = Profile(
    'privatecloud::telemetry',
    COMMON_SCHEMA,
    (COMMON, SYSLOG_FACILITY, USE_SYSLOG),
    services=('ceilometer',),
    description='Ceilometer settings shared by all telemetry nodes')

TELEMETRY_SERVER = Profile(
    'privatecloud::telemetry::server',
    SERVER_SCHEMA,
    (AGENT_AUTH, SCHEDULER, API),
    includes=(TELEMETRY,),
    services=('ceilometer', 'nova'),
    description='Ceilometer API node')


def derive_telemetry_common(params):
    return [rule.derive(params)
            for rule in (COMMON, SYSLOG_FACILITY, USE_SYSLOG)]


def derive_agent_auth(params):
    return AGENT_AUTH.derive(params)


def derive_scheduler(params):
    return SCHEDULER.derive(params)


def derive_telemetry_api(params):
    return API.derive(params)
