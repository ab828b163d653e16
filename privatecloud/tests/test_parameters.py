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

from privatecloud import consts
from privatecloud.errors import errors
from privatecloud import parameters
from privatecloud.parameters import Parameter
from privatecloud.parameters import Schema
from privatecloud.tests import base

T = consts.PARAMETER_TYPES


class TestValidate(base.BaseUnitTest):

    def setUp(self):
        self.schema = Schema(
            Parameter('host'),
            Parameter('password', T.secret),
            Parameter('hosts', T.list),
            Parameter('port', T.port),
            Parameter('debug', T.boolean, required=False, default=False),
            Parameter('proto', required=False, default='http',
                      choices=('http', 'https')),
            Parameter('region', required=False),
        )
        self.params = {
            'host': '10.0.0.1',
            'password': 'secrete',
            'hosts': ['10.0.0.1', '10.0.0.2'],
            'port': '5000',
        }

    def test_defaults_filled_for_absent_optionals(self):
        validated = parameters.validate(self.params, self.schema)
        self.assertIs(validated['debug'], False)
        self.assertEqual(validated['proto'], 'http')
        self.assertNotIn('region', validated)

    def test_given_values_override_defaults(self):
        self.params.update(debug=True, proto='https')
        validated = parameters.validate(self.params, self.schema)
        self.assertIs(validated['debug'], True)
        self.assertEqual(validated['proto'], 'https')

    def test_every_required_key_is_enforced(self):
        for key in ('host', 'password', 'hosts', 'port'):
            params = dict(self.params)
            del params[key]
            with self.assertRaises(errors.MissingKeyError) as ctx:
                parameters.validate(params, self.schema)
            self.assertEqual(ctx.exception.key, key)

    def test_first_missing_key_in_declaration_order_is_reported(self):
        with self.assertRaises(errors.MissingKeyError) as ctx:
            parameters.validate({'hosts': []}, self.schema)
        self.assertEqual(ctx.exception.key, 'host')

    def test_missing_key_message_names_the_key(self):
        del self.params['port']
        with self.assertRaises(errors.MissingKeyError) as ctx:
            parameters.validate(self.params, self.schema)
        self.assertIn("'port'", ctx.exception.message)

    def test_no_coercion_of_booleans(self):
        self.params['debug'] = 'true'
        with self.assertRaises(errors.ParameterTypeError) as ctx:
            parameters.validate(self.params, self.schema)
        self.assertEqual(ctx.exception.key, 'debug')
        self.assertEqual(ctx.exception.expected, 'boolean')
        self.assertEqual(ctx.exception.actual, 'string')

    def test_boolean_is_not_a_string(self):
        self.params['host'] = True
        with self.assertRaises(errors.ParameterTypeError) as ctx:
            parameters.validate(self.params, self.schema)
        self.assertEqual(ctx.exception.key, 'host')
        self.assertEqual(ctx.exception.actual, 'boolean')

    def test_list_items_must_be_strings(self):
        self.params['hosts'] = ['10.0.0.1', 3]
        with self.assertRaises(errors.ParameterTypeError) as ctx:
            parameters.validate(self.params, self.schema)
        self.assertEqual(ctx.exception.key, 'hosts')
        self.assertEqual(ctx.exception.actual, 'list')

    def test_list_given_as_string_fails(self):
        self.params['hosts'] = '10.0.0.1'
        with self.assertRaises(errors.ParameterTypeError) as ctx:
            parameters.validate(self.params, self.schema)
        self.assertEqual(ctx.exception.expected, 'list')

    def test_port_accepts_numbers_and_numeric_strings(self):
        for port in ('9292', 9292, '1', 1, '65535', 65535, '5000'):
            self.params['port'] = port
            validated = parameters.validate(self.params, self.schema)
            self.assertEqual(validated['port'], port)

    def test_port_rejects_garbage(self):
        for port in ('http', 70000, 0, True, '0', '70000', '65536',
                     '09292', '', '-1'):
            self.params['port'] = port
            with self.subTest(port=port):
                with self.assertRaises(errors.ParameterTypeError):
                    parameters.validate(self.params, self.schema)

    def test_choices_are_enforced(self):
        self.params['proto'] = 'ftp'
        with self.assertRaises(errors.ParameterTypeError) as ctx:
            parameters.validate(self.params, self.schema)
        self.assertEqual(ctx.exception.key, 'proto')

    def test_secrets_are_wrapped(self):
        validated = parameters.validate(self.params, self.schema)
        self.assertTrue(parameters.is_secret(validated['password']))
        self.assertEqual(validated['password'], 'secrete')
        self.assertNotIn('secrete', repr(validated['password']))
        self.assertNotIn('secrete', repr(validated))

    def test_lists_are_frozen(self):
        validated = parameters.validate(self.params, self.schema)
        self.assertEqual(validated['hosts'], ('10.0.0.1', '10.0.0.2'))

    def test_undeclared_keys_are_dropped(self):
        self.params['unknown'] = 'value'
        validated = parameters.validate(self.params, self.schema)
        self.assertNotIn('unknown', validated)

    def test_params_must_be_a_mapping(self):
        with self.assertRaises(errors.InvalidData):
            parameters.validate(['host'], self.schema)

    def test_parameter_set_is_read_only(self):
        validated = parameters.validate(self.params, self.schema)
        with self.assertRaises(TypeError):
            validated['host'] = '10.0.0.2'

    def test_input_is_not_modified(self):
        original = dict(self.params)
        parameters.validate(self.params, self.schema)
        self.assertEqual(self.params, original)


class TestSchema(base.BaseUnitTest):

    def test_required_and_optional(self):
        schema = Schema(Parameter('a'), Parameter('b', required=False))
        self.assertEqual([p.name for p in schema.required], ['a'])
        self.assertEqual([p.name for p in schema.optional], ['b'])

    def test_merge_keeps_order_and_prefers_other(self):
        first = Schema(Parameter('a'), Parameter('b'))
        second = Schema(Parameter('b', required=False), Parameter('c'))
        merged = first.merge(second)
        self.assertEqual([p.name for p in merged], ['a', 'b', 'c'])
        self.assertFalse(merged.get('b').required)

    def test_unknown_type_is_rejected(self):
        self.assertRaises(ValueError, Parameter, 'a', 'integer')

    def test_parameter_set_missing(self):
        params = parameters.ParameterSet({'a': 1})
        self.assertIsNone(params.missing(['a']))
        self.assertEqual(params.missing(['a', 'b', 'c']), 'b')
