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

"""Image service (Glance) profile"""

from privatecloud import consts
from privatecloud.parameters import Parameter
from privatecloud.parameters import Schema
from privatecloud.rules.base import Compose
from privatecloud.rules.base import DerivationRule
from privatecloud.rules.base import Fixed
from privatecloud.rules.base import Param
from privatecloud.rules.base import Profile
from privatecloud import utils


SERVICE_USER = 'glance'

T = consts.PARAMETER_TYPES


SCHEMA = Schema(
    Parameter('glance_db_host'),
    Parameter('glance_db_user'),
    Parameter('glance_db_password', T.secret),
    Parameter('ks_keystone_internal_host'),
    Parameter('ks_glance_internal_port', T.port,
              description='Port the image API is published on in keystone'),
    Parameter('ks_glance_password', T.secret),
    Parameter('rabbit_host'),
    Parameter('rabbit_password', T.secret),
    Parameter('api_eth', description='Address the API services bind to'),
    Parameter('debug', T.boolean, required=False, default=False),
    Parameter('verbose', T.boolean, required=False, default=False),
    Parameter('glance_db_name', required=False, default='glance'),
    Parameter('glance_cache_cleaning', T.boolean, required=False,
              default=True,
              description='Install the cache cleaner and pruner crontabs'),
)


def _service_fields():
    # glance-api and glance-registry take the same settings
    return (
        ('sql_connection', Compose(
            ('glance_db_user', 'glance_db_password',
             'glance_db_host', 'glance_db_name'),
            utils.build_dsn)),
        ('keystone_password', Param('ks_glance_password')),
        ('keystone_tenant', Fixed(consts.SERVICES_TENANT)),
        ('keystone_user', Fixed(SERVICE_USER)),
        ('verbose', Param('verbose')),
        ('debug', Param('debug')),
        ('auth_host', Param('ks_keystone_internal_host')),
        ('log_facility', Fixed(consts.SYSLOG_FACILITY)),
        ('bind_host', Param('api_eth')),
        ('use_syslog', Fixed(consts.USE_SYSLOG)),
    )


API = DerivationRule('glance::api', _service_fields())

REGISTRY = DerivationRule('glance::registry', _service_fields())

NOTIFY = DerivationRule('glance::notify::rabbitmq', (
    ('rabbit_password', Param('rabbit_password')),
    ('rabbit_userid', Fixed(SERVICE_USER)),
    ('rabbit_host', Param('rabbit_host')),
))

SWIFT_BACKEND = DerivationRule('glance::backend::swift', (
    ('swift_store_user', Fixed(
        utils.build_swift_user(consts.SERVICES_TENANT, SERVICE_USER))),
    ('swift_store_key', Param('ks_glance_password')),
    ('swift_store_auth_address', Param('ks_keystone_internal_host')),
))

CACHE_CLEANER = DerivationRule(
    'glance::cache::cleaner', enabled_by='glance_cache_cleaning')

CACHE_PRUNER = DerivationRule(
    'glance::cache::pruner', enabled_by='glance_cache_cleaning')


IMAGE = Profile(
    'privatecloud::image',
    SCHEMA,
    (API, REGISTRY, NOTIFY, SWIFT_BACKEND, CACHE_CLEANER, CACHE_PRUNER),
    services=('glance',),
    description='Glance API and registry with swift backend')


def derive_image_api(params):
    return API.derive(params)


def derive_image_registry(params):
    return REGISTRY.derive(params)


def derive_notification(params):
    return NOTIFY.derive(params)


def derive_swift_backend(params):
    return SWIFT_BACKEND.derive(params)


def derive_cache_policy(params):
    """Cleaner and pruner declarations, none when cache cleaning is off."""
    return [rule.derive(params)
            for rule in (CACHE_CLEANER, CACHE_PRUNER)
            if rule.enabled(params)]
