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

import yaml

from privatecloud import consts
from privatecloud import declarations
from privatecloud.declarations import TargetDeclaration
from privatecloud.parameters import SecretString
from privatecloud.tests import base


class TestTargetDeclaration(base.BaseUnitTest):

    def setUp(self):
        self.declaration = TargetDeclaration('glance::notify::rabbitmq', [
            ('rabbit_password', SecretString('secrete')),
            ('rabbit_userid', 'glance'),
            ('rabbit_hosts', ('10.0.0.1', '10.0.0.2')),
        ])

    def test_defaults_to_class(self):
        self.assertTrue(self.declaration.is_class)
        self.assertEqual(self.declaration.reference,
                         "Class['glance::notify::rabbitmq']")

    def test_resource_reference(self):
        declaration = TargetDeclaration(
            'DEFAULT/user_syslog', {'value': 'yes'},
            kind=consts.DECLARATION_KINDS.ceilometer_config)
        self.assertFalse(declaration.is_class)
        self.assertEqual(declaration.reference,
                         "Ceilometer_config['DEFAULT/user_syslog']")

    def test_attributes_keep_order(self):
        self.assertEqual(list(self.declaration.attributes),
                         ['rabbit_password', 'rabbit_userid', 'rabbit_hosts'])

    def test_attributes_are_read_only(self):
        with self.assertRaises(TypeError):
            self.declaration.attributes['rabbit_userid'] = 'nova'

    def test_declaration_is_immutable(self):
        with self.assertRaises(AttributeError):
            self.declaration.name = 'glance::api'

    def test_equality(self):
        same = TargetDeclaration('glance::notify::rabbitmq', [
            ('rabbit_password', 'secrete'),
            ('rabbit_userid', 'glance'),
            ('rabbit_hosts', ('10.0.0.1', '10.0.0.2')),
        ])
        other = TargetDeclaration('glance::notify::rabbitmq', [
            ('rabbit_userid', 'glance'),
        ])
        self.assertEqual(self.declaration, same)
        self.assertNotEqual(self.declaration, other)

    def test_to_dict(self):
        self.assertEqual(self.declaration.to_dict(), {
            'kind': 'class',
            'name': 'glance::notify::rabbitmq',
            'attributes': {
                'rabbit_password': 'secrete',
                'rabbit_userid': 'glance',
                'rabbit_hosts': ['10.0.0.1', '10.0.0.2'],
            }})

    def test_to_dict_masks_secrets(self):
        attributes = self.declaration.to_dict(mask_secrets=True)['attributes']
        self.assertEqual(attributes['rabbit_password'], '******')
        self.assertEqual(attributes['rabbit_userid'], 'glance')

    def test_to_dict_returns_plain_strings(self):
        attributes = self.declaration.to_dict()['attributes']
        self.assertIs(type(attributes['rabbit_password']), str)


class TestDump(base.BaseUnitTest):

    def test_dump_is_loadable(self):
        declaration = TargetDeclaration('nova::scheduler', {'enabled': True})
        loaded = yaml.safe_load(declarations.dump([declaration]))
        self.assertEqual(loaded, [{'kind': 'class',
                                   'name': 'nova::scheduler',
                                   'attributes': {'enabled': True}}])

    def test_dump_masks_secrets(self):
        declaration = TargetDeclaration(
            'ceilometer', {'metering_secret': SecretString('secrete')})
        self.assertNotIn('secrete', declarations.dump([declaration], True))
        self.assertIn('secrete', declarations.dump([declaration]))
